"""
Basic options: construction, combinators, and collection helpers.

Run: python examples/basic_options.py
"""
from optionpy import Some, NONE, Nothing, detect, fetch, flatten, from_nullable


def main():
    settings = {"port": "8080", "debug": ""}

    # Lookups return options instead of raising or returning None
    port = fetch(settings, "port").map(int).filter(lambda p: p > 1024)
    host = fetch(settings, "host").get_or_else("localhost")
    print("port =>", port)                  # Some(8080)
    print("host =>", host)                  # localhost

    # Falsy values are still present
    print("debug =>", repr(fetch(settings, "debug")))   # Some('')

    # flat_map chains lookups that may each be missing
    users = {1: {"name": "ada"}, 2: {}}
    name = lambda uid: fetch(users, uid).flat_map(lambda u: fetch(u, "name"))
    print("names =>", flatten([name(1), name(2), name(3)]))   # ['ada']

    first_big = detect([3, 9, 27], lambda x: x > 5)
    print("first_big =>", first_big)        # Some(9)
    print("absent =>", Nothing(int), NONE == from_nullable(None))   # None() True


if __name__ == "__main__":
    main()
