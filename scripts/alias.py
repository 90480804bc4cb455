"""Use the short ``Vel`` alias and iterate over elements."""
from veclite import Vel


def main() -> None:
    numbers = Vel.new()
    for i in range(1, 4):
        numbers.push(i)
    print("".join(f"[{n}]" for n in numbers.iter()))


if __name__ == "__main__":
    main()
