"""Remove by index from a container of names."""
from veclite import Veclite


def main() -> None:
    names = Veclite()
    names.add("Alice")
    names.add("Bob")
    names.add("Carol")
    print(names)

    removed = names.remove(0)
    print(f"Removed {removed}")
    print(names)


if __name__ == "__main__":
    main()
