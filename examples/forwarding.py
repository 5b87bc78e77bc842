"""
Forwarding: call members of the wrapped value only when it is present.

Run: python examples/forwarding.py
"""
from optionpy import Some, Nothing, configure


class Counter:
    def __init__(self):
        self.n = 0

    def add(self, k: int) -> int:
        self.n += k
        return self.n

    def reset(self) -> None:
        self.n = 0


def main():
    configure(level="DEBUG")  # show skipped calls on stderr

    calls = {"args": 0}

    def expensive():
        calls["args"] += 1
        return 5

    present = Some(Counter())
    absent = Nothing(Counter)

    print("present.add =>", present.forward.add(expensive))   # Some(5)
    print("absent.add =>", absent.forward.add(expensive))     # None()
    print("args evaluated =>", calls["args"])                 # 1

    print("reset =>", present.forward.reset())                # None (void)
    print("n =>", present.forward.n())                        # Some(0)


if __name__ == "__main__":
    main()
