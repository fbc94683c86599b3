from __future__ import annotations

import itertools

from kungfu import Some

from iterflat import flatten, seq


def main() -> None:
    print("\n== 01_quickstart: flatten + rev + flatten_ext ==")

    batches = [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
    print(flatten(batches).collect())
    print(list(reversed(flatten(batches))))

    nested = [[[1, 2, 3], [4, 5, 6]], [[7, 8, 9]]]
    print(seq(nested).flatten_ext().flatten_ext().count())

    # Infinite outer: only as much as asked for is ever produced
    triangle = flatten(range(k) for k in itertools.count())
    print(list(itertools.islice(triangle, 10)))

    match flatten([[], ["only"]]).pull_back():
        case Some(value):
            print(f"last: {value}")
        case _:
            print("empty")


if __name__ == "__main__":
    main()
