from __future__ import annotations

from dataclasses import dataclass

from boolbuilder import all_of, any_of, either, inverted, try_all_of


@dataclass(frozen=True)
class User:
    name: str
    is_admin: bool
    is_banned: bool
    groups: tuple[str, ...] = ()


def load_quota(user: User) -> int:
    if user.name == "ghost":
        raise LookupError(f"No quota record for {user.name}")
    return 10


def can_edit(user: User, owner: str) -> bool:
    return all_of(
        inverted(user.is_banned),
        lambda: any_of(
            user.is_admin,
            lambda: user.name == owner,
            lambda: "editors" in user.groups,
        ),
    )


def can_upload(user: User) -> bool:
    # load_quota is only reached for users that are not banned
    return try_all_of(
        inverted(user.is_banned),
        lambda: load_quota(user) > 0,
    )


def main() -> None:
    alice = User(name="alice", is_admin=False, is_banned=False, groups=("editors",))
    mallory = User(name="mallory", is_admin=True, is_banned=True)
    ghost = User(name="ghost", is_admin=False, is_banned=False)

    print(f"alice can edit: {can_edit(alice, owner='bob')}")
    print(f"mallory can edit: {can_edit(mallory, owner='mallory')}")
    print(f"alice xor mallory admin: {either(alice.is_admin, mallory.is_admin)}")

    try:
        can_upload(ghost)
    except LookupError as exc:
        print(f"ghost upload check failed: {exc}")


if __name__ == "__main__":
    main()
