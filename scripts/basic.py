"""Append, prepend and print a container."""
from veclite import Veclite


def main() -> None:
    items = Veclite()
    items.add(10)
    items.add(20)
    items.prepend(5)
    print(items)  # 5 10 20


if __name__ == "__main__":
    main()
