"""
Example 02: Avoiding Large Computations

In strict evaluation all arguments are evaluated before the function
body runs. Lazy evaluation only forces the arguments the function
actually uses, so an unused argument may even be an endless loop.
"""

from lazy_lists import bottom, first, lazy_first


if __name__ == "__main__":
    print("Strict first(10, 20):", first(10, 20))

    # first(10, bottom()) would never return: bottom() runs before first does
    print("\nLazy first with a bottomless second argument:")
    y = lazy_first(lambda: 10, lambda: bottom())
    print(y())

    print("\n✅ Only the argument that was needed got evaluated!")
