"""Basic Chromix usage examples.

Run directly with:
    python examples/basic_usage.py
"""
from chromix import Color, rgb_to_hsv, hsv_to_rgb


def demonstrate_arithmetic() -> None:
    # Operators return new colors; every channel, alpha included, is clamped and rounded.
    grey = Color(100, 100, 100)
    print("grey + 5:", grey + 5)
    print("grey / Color(55, 55, 55):", grey / Color(55, 55, 55))
    print("2 - Color(5, 5, 5):", 2 - Color(5, 5, 5))
    print("grey / 0:", grey / 0)


def demonstrate_comparison() -> None:
    # Equality is exact; ordering looks at brightness only.
    red = Color(255, 0, 0)
    white = Color()
    print("red == white:", red == white)
    print("red < white:", red < white)
    print("red <= white:", red <= white)
    print("Color(254, 254, 254) < white:", Color(254, 254, 254) < white)


def demonstrate_hsv() -> None:
    orange = Color(255, 128, 0)
    h, s, v, a = orange.to_hsv()
    print(f"orange in HSV: h={h:.2f} s={s:.2f} v={v:.2f} a={a}")
    print("back to RGB:", Color.from_hsv(h, s, v, a))
    print("rgb_to_hsv(0, 0, 255):", rgb_to_hsv(0, 0, 255))
    print("hsv_to_rgb(120, 1, 1):", hsv_to_rgb(120, 1, 1))


def demonstrate_mutators() -> None:
    # In-place mutators modify the receiver and return it for chaining.
    c = Color(10, 20, 30)
    c.add_r(5).mul_g(2).set_alpha(128)
    print("mutated:", c)


if __name__ == "__main__":
    demonstrate_arithmetic()
    demonstrate_comparison()
    demonstrate_hsv()
    demonstrate_mutators()
