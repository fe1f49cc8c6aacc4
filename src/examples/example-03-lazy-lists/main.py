"""
Example 03: Lazy Lists

A list can be divided into its head (the first element) and its tail
(the list of remaining elements). Wrapping both parts in thunks makes
the list lazy.
"""

from lazy_lists import LazyNode, StrictNode, head, tail, to_lazy_list, to_list


if __name__ == "__main__":
    a_list = StrictNode(1, StrictNode(2, StrictNode(3, None)))
    print(f"Strict list: {a_list.to_list()}")

    # Written out by hand, a lazy list quickly becomes tedious
    a_lazy_list = lambda: LazyNode(
        head=lambda: 1,
        tail=lambda: LazyNode(
            head=lambda: 2,
            tail=lambda: LazyNode(head=lambda: 3, tail=lambda: None),
        ),
    )
    print(f"Hand-written lazy list: {to_list(a_lazy_list)}")

    a_lazy_list = to_lazy_list([1, 2, 3])
    print("\nfirst element:", head(a_lazy_list))
    print("second element:", head(tail(a_lazy_list)))
    print("third element:", head(tail(tail(a_lazy_list))))

    print(f"\nConverted back to a Python list: {to_list(a_lazy_list)}")

    print("\n✅ Elements are only computed when their head is forced!")
