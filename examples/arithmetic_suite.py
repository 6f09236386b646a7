"""Example: a small suite covering the three built-in check kinds.

Run with:
    verdict examples.arithmetic_suite -n arithmetic

Only the division tests:
    verdict examples.arithmetic_suite -n arithmetic -k division
"""

from verdict import (
    Values,
    assert_equal,
    assert_prints,
    assert_raises,
    binding,
    define_test,
    deftest,
)


NS = "arithmetic"


def greet(name: str) -> None:
    print(f"Hello, {name}!")


define_test(
    "addition",
    [
        assert_equal(lambda: 1 + 1, 2, form="1 + 1"),
        assert_equal(lambda: 0.1 + 0.2, 0.3, test=lambda a, b: abs(a - b) < 1e-9, form="0.1 + 0.2"),
    ],
    namespace=NS,
)

define_test(
    "division",
    [
        assert_equal(lambda: Values(*divmod(7, 2)), 3, 1, form="divmod(7, 2)"),
        assert_raises("zero-division-error", lambda: 1 / 0, form="1 / 0"),
    ],
    namespace=NS,
)


@deftest(bindings={"name": lambda: "world"}, namespace=NS)
def greeting():
    return [
        assert_prints("Hello, world!\n", lambda: greet(binding("name")), form="greet(name)"),
    ]
