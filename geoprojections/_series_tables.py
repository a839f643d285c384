"""
Coefficient tables for the geodesic series expansions.

Each entry is a pair (coefficients, denominator), where coefficients are the
integer coefficients of a polynomial in ascending powers and denominator is
the integer it is divided by. The polynomial variable is eps**2 for the A1,
A2, C1, C1p and C2 tables and the third flattening n for the A3 and C3x
tables. Fourier coefficient l of C1, C1p and C2 is additionally multiplied by
eps**l.

Tables are keyed by series order (A1 and A2 by order // 2; A3 by container
size, which equals the order). Truncation differs between orders, so the
lower-order rows are not simple prefixes of the higher-order ones.

Derived with Maxima from the expansions in
C. F. F. Karney, "Algorithms for geodesics", J. Geodesy 87, 43-55 (2013).
"""

# A1 - 1 = (t + eps) / (1 - eps), t keyed by order // 2
A1_TABLE = {
    0: ((), 1),
    1: ((0, 1), 4),
    2: ((0, 16, 1), 64),
    3: ((0, 64, 4, 1), 256),
    4: ((0, 4096, 256, 64, 25), 16384),
}

# A2 - 1 = (t - eps) / (1 + eps), t keyed by order // 2
A2_TABLE = {
    0: ((), 1),
    1: ((0, -3), 4),
    2: ((0, -48, -7), 64),
    3: ((0, -192, -28, -11), 256),
    4: ((0, -12288, -1792, -704, -375), 16384),
}

A3_TABLE = {
    0: (),
    1: (
        ((1,), 1),
    ),
    2: (
        ((1,), 1),
        ((-1,), 2),
    ),
    3: (
        ((1,), 1),
        ((-1, 1), 2),
        ((-1,), 4),
    ),
    4: (
        ((1,), 1),
        ((-1, 1), 2),
        ((-2, -1), 8),
        ((-1,), 16),
    ),
    5: (
        ((1,), 1),
        ((-1, 1), 2),
        ((-2, -1, 3), 8),
        ((-1, -3), 16),
        ((-3,), 64),
    ),
    6: (
        ((1,), 1),
        ((-1, 1), 2),
        ((-2, -1, 3), 8),
        ((-1, -3, -1), 16),
        ((-3, -2), 64),
        ((-3,), 128),
    ),
    7: (
        ((1,), 1),
        ((-1, 1), 2),
        ((-2, -1, 3), 8),
        ((-1, -3, -1, 5), 16),
        ((-3, -2, -10), 64),
        ((-3, -5), 128),
        ((-5,), 256),
    ),
    8: (
        ((1,), 1),
        ((-1, 1), 2),
        ((-2, -1, 3), 8),
        ((-1, -3, -1, 5), 16),
        ((-6, -4, -20, -5), 128),
        ((-6, -10, -5), 256),
        ((-20, -15), 1024),
        ((-25,), 2048),
    ),
}

# Rows hold C1[1] .. C1[order]
C1_TABLE = {
    0: (),
    1: (
        ((-1,), 2),
    ),
    2: (
        ((-1,), 2),
        ((-1,), 16),
    ),
    3: (
        ((-8, 3), 16),
        ((-1,), 16),
        ((-1,), 48),
    ),
    4: (
        ((-8, 3), 16),
        ((-2, 1), 32),
        ((-1,), 48),
        ((-5,), 512),
    ),
    5: (
        ((-16, 6, -1), 32),
        ((-2, 1), 32),
        ((-16, 9), 768),
        ((-5,), 512),
        ((-7,), 1280),
    ),
    6: (
        ((-16, 6, -1), 32),
        ((-128, 64, -9), 2048),
        ((-16, 9), 768),
        ((-5, 3), 512),
        ((-7,), 1280),
        ((-7,), 2048),
    ),
    7: (
        ((-1024, 384, -64, 19), 2048),
        ((-128, 64, -9), 2048),
        ((-128, 72, -9), 6144),
        ((-5, 3), 512),
        ((-56, 35), 10240),
        ((-7,), 2048),
        ((-33,), 14336),
    ),
    8: (
        ((-1024, 384, -64, 19), 2048),
        ((-256, 128, -18, 7), 4096),
        ((-128, 72, -9), 6144),
        ((-160, 96, -11), 16384),
        ((-56, 35), 10240),
        ((-14, 9), 4096),
        ((-33,), 14336),
        ((-429,), 262144),
    ),
}

# Rows hold C1p[1] .. C1p[order]
C1P_TABLE = {
    0: (),
    1: (
        ((1,), 2),
    ),
    2: (
        ((1,), 2),
        ((5,), 16),
    ),
    3: (
        ((16, -9), 32),
        ((5,), 16),
        ((29,), 96),
    ),
    4: (
        ((16, -9), 32),
        ((30, -37), 96),
        ((29,), 96),
        ((539,), 1536),
    ),
    5: (
        ((768, -432, 205), 1536),
        ((30, -37), 96),
        ((116, -225), 384),
        ((539,), 1536),
        ((3467,), 7680),
    ),
    6: (
        ((768, -432, 205), 1536),
        ((3840, -4736, 4005), 12288),
        ((116, -225), 384),
        ((2695, -7173), 7680),
        ((3467,), 7680),
        ((38081,), 61440),
    ),
    7: (
        ((36864, -20736, 9840, -4879), 73728),
        ((3840, -4736, 4005), 12288),
        ((3712, -7200, 8703), 12288),
        ((2695, -7173), 7680),
        ((41604, -141115), 92160),
        ((38081,), 61440),
        ((459485,), 516096),
    ),
    8: (
        ((36864, -20736, 9840, -4879), 73728),
        ((115200, -142080, 120150, -86171), 368640),
        ((3712, -7200, 8703), 12288),
        ((258720, -688608, 1082857), 737280),
        ((41604, -141115), 92160),
        ((533134, -2200311), 860160),
        ((459485,), 516096),
        ((109167851,), 82575360),
    ),
}

# Rows hold C2[1] .. C2[order]
C2_TABLE = {
    0: (),
    1: (
        ((1,), 2),
    ),
    2: (
        ((1,), 2),
        ((3,), 16),
    ),
    3: (
        ((8, 1), 16),
        ((3,), 16),
        ((5,), 48),
    ),
    4: (
        ((8, 1), 16),
        ((6, 1), 32),
        ((5,), 48),
        ((35,), 512),
    ),
    5: (
        ((16, 2, 1), 32),
        ((6, 1), 32),
        ((80, 15), 768),
        ((35,), 512),
        ((63,), 1280),
    ),
    6: (
        ((16, 2, 1), 32),
        ((384, 64, 35), 2048),
        ((80, 15), 768),
        ((35, 7), 512),
        ((63,), 1280),
        ((77,), 2048),
    ),
    7: (
        ((1024, 128, 64, 41), 2048),
        ((384, 64, 35), 2048),
        ((640, 120, 69), 6144),
        ((35, 7), 512),
        ((504, 105), 10240),
        ((77,), 2048),
        ((429,), 14336),
    ),
    8: (
        ((1024, 128, 64, 41), 2048),
        ((768, 128, 70, 47), 4096),
        ((640, 120, 69), 6144),
        ((1120, 224, 133), 16384),
        ((504, 105), 10240),
        ((154, 33), 4096),
        ((429,), 14336),
        ((6435,), 262144),
    ),
}

# Triangular table: for l = 1 .. order-1, (order - l) rows giving the
# coefficients of eps**(l+j), j = 0 .. order-l-1, of C3[l]
C3X_TABLE = {
    0: (),
    1: (),
    2: (
        ((1, -1), 4),
    ),
    3: (
        ((1, -1), 4),
        ((1, 0, -1), 8),
        ((2, -3, 1), 32),
    ),
    4: (
        ((1, -1), 4),
        ((1, 0, -1), 8),
        ((3, 3, -1, -5), 64),
        ((2, -3, 1), 32),
        ((3, -2, -3, 2), 64),
        ((5, -9, 5, -1), 192),
    ),
    5: (
        ((1, -1), 4),
        ((1, 0, -1), 8),
        ((3, 3, -1, -5), 64),
        ((5, 2, 2, -2), 128),
        ((2, -3, 1), 32),
        ((3, -2, -3, 2), 64),
        ((6, 2, -9, -6), 256),
        ((5, -9, 5, -1), 192),
        ((9, -10, -6, 10), 384),
        ((14, -28, 20, -7), 1024),
    ),
    6: (
        ((1, -1), 4),
        ((1, 0, -1), 8),
        ((3, 3, -1, -5), 64),
        ((5, 2, 2, -2), 128),
        ((12, 11, 3), 512),
        ((2, -3, 1), 32),
        ((3, -2, -3, 2), 64),
        ((6, 2, -9, -6), 256),
        ((5, 1, -2), 256),
        ((5, -9, 5, -1), 192),
        ((9, -10, -6, 10), 384),
        ((42, -8, -77), 3072),
        ((14, -28, 20, -7), 1024),
        ((28, -40, -7), 2048),
        ((42, -90, 75), 5120),
    ),
    7: (
        ((1, -1), 4),
        ((1, 0, -1), 8),
        ((3, 3, -1, -5), 64),
        ((5, 2, 2, -2), 128),
        ((12, 11, 3), 512),
        ((21, 10), 1024),
        ((2, -3, 1), 32),
        ((3, -2, -3, 2), 64),
        ((6, 2, -9, -6), 256),
        ((5, 1, -2), 256),
        ((108, 69), 8192),
        ((5, -9, 5, -1), 192),
        ((9, -10, -6, 10), 384),
        ((42, -8, -77), 3072),
        ((12, -1), 1024),
        ((14, -28, 20, -7), 1024),
        ((28, -40, -7), 2048),
        ((72, -43), 8192),
        ((42, -90, 75), 5120),
        ((9, -15), 1024),
        ((44, -99), 8192),
    ),
    8: (
        ((1, -1), 4),
        ((1, 0, -1), 8),
        ((3, 3, -1, -5), 64),
        ((5, 2, 2, -2), 128),
        ((12, 11, 3), 512),
        ((21, 10), 1024),
        ((243,), 16384),
        ((2, -3, 1), 32),
        ((3, -2, -3, 2), 64),
        ((6, 2, -9, -6), 256),
        ((5, 1, -2), 256),
        ((108, 69), 8192),
        ((187,), 16384),
        ((5, -9, 5, -1), 192),
        ((9, -10, -6, 10), 384),
        ((42, -8, -77), 3072),
        ((12, -1), 1024),
        ((139,), 16384),
        ((14, -28, 20, -7), 1024),
        ((28, -40, -7), 2048),
        ((72, -43), 8192),
        ((127,), 16384),
        ((42, -90, 75), 5120),
        ((9, -15), 1024),
        ((99,), 16384),
        ((44, -99), 8192),
        ((99,), 16384),
        ((429,), 114688),
    ),
}
