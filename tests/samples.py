# unit rgb -> (h, s, v)
samples_rgb_hsv = {
    (0.0, 0.0, 0.0): (0.0, 0.0, 0.0),
    (1.0, 1.0, 1.0): (0.0, 0.0, 1.0),
    (0.5, 0.5, 0.5): (0.0, 0.0, 0.5),
    (1.0, 0.0, 0.0): (0.0, 1.0, 1.0),
    (1.0, 0.5, 0.0): (30.0, 1.0, 1.0),
    (1.0, 1.0, 0.0): (60.0, 1.0, 1.0),
    (0.0, 1.0, 0.0): (120.0, 1.0, 1.0),
    (0.25, 0.75, 0.5): (150.0, 2 / 3, 0.75),
    (0.0, 1.0, 1.0): (180.0, 1.0, 1.0),
    (0.2, 0.4, 0.6): (210.0, 2 / 3, 0.6),
    (0.0, 0.0, 1.0): (240.0, 1.0, 1.0),
    (1.0, 0.0, 1.0): (300.0, 1.0, 1.0),
    (0.6, 0.2, 0.4): (330.0, 2 / 3, 0.6),
}

# 8-bit (r, g, b, a) -> (h, s, v, a)
samples_color_hsv = {
    (0, 0, 0, 0): (0.0, 0.0, 0.0, 0),
    (255, 255, 255, 255): (0.0, 0.0, 1.0, 255),
    (128, 128, 128, 10): (0.0, 0.0, 128 / 255, 10),
    (255, 0, 0, 255): (0.0, 1.0, 1.0, 255),
    (255, 128, 0, 200): (60.0 * 128 / 255, 1.0, 1.0, 200),
    (0, 255, 0, 255): (120.0, 1.0, 1.0, 255),
    (0, 0, 255, 1): (240.0, 1.0, 1.0, 1),
    (255, 0, 128, 255): (360.0 - 60.0 * 128 / 255, 1.0, 1.0, 255),
}
