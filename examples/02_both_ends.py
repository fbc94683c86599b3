from __future__ import annotations

import logging

from kungfu import Some

from iterflat import flatten


def main() -> None:
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
    print("\n== 02_both_ends: interleaved front/back pulls ==")

    it = flatten([["a1", "a2", "a3"], ["b1", "b2", "b3"]])
    front: list[str] = []
    back: list[str] = []

    while True:
        progressed = False
        match it.pull_front():
            case Some(value):
                front.append(value)
                progressed = True
            case _:
                pass
        match it.pull_back():
            case Some(value):
                back.append(value)
                progressed = True
            case _:
                pass
        if not progressed:
            break

    print(f"front: {front}")  # ['a1', 'a2', 'a3']
    print(f"back:  {back}")   # ['b3', 'b2', 'b1']


if __name__ == "__main__":
    main()
