from __future__ import annotations

import logging

from boolbuilder import Trace, all_of, any_of

logging.basicConfig(level=logging.DEBUG)


def main() -> None:
    trace = Trace()
    result = all_of(
        lambda: any_of(False, lambda: 2 > 1, lambda: 1 / 0 > 0, trace=trace),
        lambda: "x" in "xyz",
        trace=trace,
    )
    print(f"result: {result}")

    for ev in trace.get_events():
        print(f"{ev.id:>2} parent={ev.parent_id} {ev.action} {ev.info}")
    print(trace.as_tree())


if __name__ == "__main__":
    main()
