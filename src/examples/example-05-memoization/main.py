"""
Example 05: Memoization

Thunks recompute every time they are forced. Sharing a computed result
has to be requested explicitly with memoize.
"""

import time

from lazy_lists import from_iterable, head, memoize, take, to_list


def slow_square(n):
    """Thunk that takes a while to compute n squared."""
    def force():
        time.sleep(0.2)
        return n * n
    return force


if __name__ == "__main__":
    plain = slow_square(12)
    start = time.time()
    plain(), plain(), plain()
    print(f"Plain thunk forced 3 times: {time.time() - start:.2f}s")

    shared = memoize(slow_square(12))
    start = time.time()
    shared(), shared(), shared()
    print(f"Memoized thunk forced 3 times: {time.time() - start:.2f}s")

    # from_iterable memoizes each node, so a generator is consumed only once
    words = from_iterable(word.upper() for word in ["lazy", "lists", "share"])
    print(f"\nFirst word (forced twice): {head(words)}, {head(words)}")
    print(f"First two words: {to_list(take(2, words))}")
    print(f"All words: {to_list(words)}")

    print("\n✅ memoize turns recomputation into sharing!")
