"""Basic usage example for revlist."""

import logging

from revlist import LinkedList


def main() -> None:
    """Demonstrate building, reversing and releasing a list."""
    logging.basicConfig(level=logging.DEBUG)

    print("=== Build ===\n")
    lst = LinkedList[int]()
    for value in [2, 3, 5, 11, 9, 7]:
        lst.add(value)
    print(f"Linked list is {lst}")
    print(f"Length: {lst.length}")
    print(f"Value at index 3: {lst.get(3)}")
    print(f"Value at index 42: {lst.get(42)}\n")

    print("=== Reverse ===\n")
    lst.reverse()
    print(f"Reversed linked list is {lst}")
    print(f"Walking backwards: {list(reversed(lst))}\n")

    print("=== Release ===\n")
    with LinkedList(["A", "B", "C"], on_release=lambda v: print(f"  released {v}")) as names:
        print(f"Names: {names}")
    print(f"Names after release: {names!r}")


if __name__ == "__main__":
    main()
