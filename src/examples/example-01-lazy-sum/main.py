"""
Example 01: Lazy Sum

Lazy evaluation can be thought of as wrapping a function around each
argument and only calling those functions when the value is needed.

lazy_sum accepts "lazy" numbers and returns their lazy sum. The
arguments are evaluated at the last possible moment, just before the
result is needed.
"""

from lazy_lists import lazy_sum


def noisy(value):
    """Thunk that announces when it is forced."""
    def force():
        print(f"  forcing {value}")
        return value
    return force


if __name__ == "__main__":
    print("Building the lazy sum (nothing is forced yet):")
    result = lazy_sum(lazy_sum(noisy(1), noisy(2)), lazy_sum(noisy(3), noisy(4)))

    print("\nForcing the result with ():")
    print("total", result())

    print("\nForcing it again recomputes everything:")
    print("total", result())

    print("\n✅ Lazy values are only computed when forced!")
