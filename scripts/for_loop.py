"""Iterate over a container by value, by reference and in place."""
from veclite import configure_logging, vel


def main() -> None:
    configure_logging()
    numbers = vel(1, 2, 3)

    for n in numbers.copy():
        print(f"By value: {n}")

    for n in numbers:
        print(f"By reference: {n}")

    numbers.update(lambda n: n * 10)
    for n in numbers:
        print(f"Updated in place: {n}")


if __name__ == "__main__":
    main()
