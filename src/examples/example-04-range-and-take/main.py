"""
Example 04: Infinite Ranges and take

lazy_range(start) is an infinite lazy list [start, start + 1, ...].
Draining it directly never terminates, but take(n, xs) gives a bounded
view that only forces the first n elements.
"""

from lazy_lists import ForceCounter, iterate, lazy_range, take, to_list


if __name__ == "__main__":
    print("take(10, lazy_range(100)):")
    print(f"  {to_list(take(10, lazy_range(100)))}")

    counter = ForceCounter()
    numbers = counter.lazy_list(lazy_range(0))
    print(f"\nDraining take(5, ...) of a counted range: {to_list(take(5, numbers))}")
    print(f"  Elements forced: {counter.head_forces}")

    print("\nPulling from a range with a for loop:")
    for number in iterate(lazy_range(1)):
        if number > 5:
            break
        print(f"  {number}")

    print("\n✅ Infinite lists are fine as long as you only force what you need!")
    print("   (Try not to call to_list(lazy_range(1)) - it will run forever!)")
