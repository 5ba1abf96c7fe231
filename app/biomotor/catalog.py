"""
Built-in biomotor test catalog and norm table.

Each entry is a :class:`~app.schemas.biomotor.BiomotorTest`.  Tests are
grouped into six categories (strength, speed, endurance, flexibility,
power, agility) and looked up by ``test_id``.

Norms
-----
For every test with published norms, ``_BASE_NORMS`` holds the five
``(low, high)`` bands for the young-adult bracket, male first, female
second.  The other age brackets are derived by scaling every bound::

    youth 0.9 · young_adult 1.0 · adult 0.95 · senior 0.85

The resulting :class:`~app.schemas.biomotor.NormTable` carries
``NORM_TABLE_VERSION`` so that a stored evaluation can always be traced
back to the norms it was made against.  Bump the version whenever a
band changes.

The timed runs (``run_1600m``, ``run_2400m``, ``run_3000m``) are
catalogued but have no norms yet; evaluating them raises
:class:`~app.engine.errors.UnknownTestError`.
"""

from __future__ import annotations

from typing import Optional

from app.engine.errors import UnknownTestError
from app.schemas.biomotor import AgeBracket, BiomotorTest, NormRange, NormTable, NormTier, Sex, TestCategory

NORM_TABLE_VERSION = "2024.1"

# ======================================================================
# Catalog storage
# ======================================================================

BIOMOTOR_TESTS: dict[str, BiomotorTest] = {}


def register_test(test: BiomotorTest) -> None:
    """Register a test in the global catalog."""
    BIOMOTOR_TESTS[test.test_id] = test


def get_test(test_id: str) -> Optional[BiomotorTest]:
    """Look up a test by its ID.  Returns ``None`` if not found."""
    return BIOMOTOR_TESTS.get(test_id)


def get_test_or_raise(test_id: str) -> BiomotorTest:
    test = BIOMOTOR_TESTS.get(test_id)
    if test is None:
        raise UnknownTestError(f"Unknown biomotor test '{test_id}'")
    return test


def list_tests(category: Optional[TestCategory] = None) -> list[BiomotorTest]:
    """All catalogued tests, optionally restricted to one category, in catalog order."""
    return [t for t in BIOMOTOR_TESTS.values() if category is None or t.category == category]


# ======================================================================
# Helpers
# ======================================================================

# Aliases for brevity in the table below
ST = TestCategory.STRENGTH
SP = TestCategory.SPEED
EN = TestCategory.ENDURANCE
FL = TestCategory.FLEXIBILITY
PW = TestCategory.POWER
AG = TestCategory.AGILITY


def _t(test_id: str, name: str, category: TestCategory, unit: str, description: str, higher_is_better: bool = True,
       **flags) -> BiomotorTest:
    return BiomotorTest(test_id=test_id, name=name, category=category, unit=unit, description=description,
                        higher_is_better=higher_is_better, **flags)


# ======================================================================
# Built-in tests
# ======================================================================

_TESTS: list[BiomotorTest] = [
    # ── Strength: 1RM (relative to body weight) ───────────────────
    _t("squat_1rm", "Squat 1RM", ST, "x BW", "Back squat one-rep max relative to body weight",
       relative_to_body_weight=True),
    _t("deadlift_1rm", "Deadlift 1RM", ST, "x BW", "Deadlift one-rep max relative to body weight",
       relative_to_body_weight=True),
    _t("bench_press_1rm", "Bench Press 1RM", ST, "x BW", "Bench press one-rep max relative to body weight",
       relative_to_body_weight=True),
    _t("overhead_press_1rm", "Overhead Press 1RM", ST, "x BW", "Overhead press one-rep max relative to body weight",
       relative_to_body_weight=True),
    _t("power_clean_1rm", "Power Clean 1RM", ST, "x BW", "Power clean one-rep max relative to body weight",
       relative_to_body_weight=True),

    # ── Strength: dynamometer ─────────────────────────────────────
    _t("grip_right", "Grip Dynamometer (Right)", ST, "kg", "Right hand grip strength", dynamometer=True),
    _t("grip_left", "Grip Dynamometer (Left)", ST, "kg", "Left hand grip strength", dynamometer=True),
    _t("back_dynamometer", "Back Dynamometer", ST, "kg", "Back extensor strength", dynamometer=True),
    _t("leg_dynamometer", "Leg Dynamometer", ST, "kg", "Leg extensor strength", dynamometer=True),

    # ── Strength: bodyweight ──────────────────────────────────────
    _t("push_up", "Push Up", ST, "reps", "Push ups completed in one minute"),
    _t("pull_up", "Pull Up", ST, "reps", "Maximum pull ups"),
    _t("sit_up", "Sit Up", ST, "reps", "Sit ups completed in one minute"),

    # ── Speed ─────────────────────────────────────────────────────
    _t("sprint_10m", "Sprint 10m", SP, "s", "10 metre sprint time", False),
    _t("sprint_20m", "Sprint 20m", SP, "s", "20 metre sprint time", False),
    _t("sprint_30m", "Sprint 30m", SP, "s", "30 metre sprint time", False),
    _t("sprint_40m", "Sprint 40m", SP, "s", "40 metre sprint time", False),
    _t("sprint_50m", "Sprint 50m", SP, "s", "50 metre sprint time", False),
    _t("sprint_60m", "Sprint 60m", SP, "s", "60 metre sprint time", False),
    _t("sprint_100m", "Sprint 100m", SP, "s", "100 metre sprint time", False),
    _t("flying_30m", "Flying 30m", SP, "s", "30 metre sprint time with a running start", False),
    _t("reaction_time", "Reaction Time", SP, "ms", "Simple reaction time", False),
    _t("tapping_speed", "Tapping Speed", SP, "reps/10s", "Foot taps in 10 seconds"),

    # ── Endurance ─────────────────────────────────────────────────
    _t("cooper_12min", "Cooper Test (12 min)", EN, "m", "Distance covered in 12 minutes"),
    _t("beep_test", "Beep Test (MFT)", EN, "level", "Multi-stage fitness test level"),
    _t("yo_yo_ir1", "Yo-Yo IR1", EN, "m", "Yo-Yo intermittent recovery level 1 distance"),
    _t("yo_yo_ir2", "Yo-Yo IR2", EN, "m", "Yo-Yo intermittent recovery level 2 distance"),
    _t("run_1600m", "1600m Run", EN, "min:s", "1600 metre run time", False),
    _t("run_2400m", "2400m Run", EN, "min:s", "2400 metre run time", False),
    _t("run_3000m", "3000m Run", EN, "min:s", "3000 metre run time", False),
    _t("harvard_step", "Harvard Step Test", EN, "index", "Harvard step test index"),
    _t("resting_hr", "Resting Heart Rate", EN, "bpm", "Morning resting heart rate", False),
    _t("vo2max_estimated", "VO2max (Estimated)", EN, "ml/kg/min", "Estimated maximal oxygen uptake"),

    # ── Flexibility ───────────────────────────────────────────────
    _t("sit_and_reach", "Sit and Reach", FL, "cm", "Seated reach distance"),
    _t("shoulder_flexibility_right", "Shoulder Flexibility (Right)", FL, "cm", "Right shoulder flexibility"),
    _t("shoulder_flexibility_left", "Shoulder Flexibility (Left)", FL, "cm", "Left shoulder flexibility"),
    _t("trunk_rotation_right", "Trunk Rotation (Right)", FL, "deg", "Trunk rotation to the right"),
    _t("trunk_rotation_left", "Trunk Rotation (Left)", FL, "deg", "Trunk rotation to the left"),
    _t("hip_flexion", "Hip Flexion", FL, "deg", "Hip flexion range"),
    _t("ankle_dorsiflexion", "Ankle Dorsiflexion", FL, "deg", "Ankle dorsiflexion range"),
    _t("hamstring_flexibility", "Hamstring Flexibility", FL, "deg", "Straight leg raise angle"),
    _t("quadriceps_flexibility", "Quadriceps Flexibility", FL, "cm", "Quadriceps flexibility"),
    _t("thomas_test", "Thomas Test", FL, "deg", "Hip flexor flexibility"),

    # ── Power ─────────────────────────────────────────────────────
    _t("vertical_jump", "Vertical Jump", PW, "cm", "Vertical jump height"),
    _t("broad_jump", "Standing Broad Jump", PW, "cm", "Standing long jump distance"),
    _t("triple_hop", "Triple Hop", PW, "cm", "Triple hop distance"),
    _t("squat_jump", "Squat Jump", PW, "cm", "Squat jump height"),
    _t("cmj", "Counter Movement Jump", PW, "cm", "Counter movement jump height"),
    _t("drop_jump", "Drop Jump", PW, "cm", "Drop jump height from a 30 cm box"),
    _t("medicine_ball_throw", "Medicine Ball Throw", PW, "m", "3 kg medicine ball throw distance"),
    _t("shot_put", "Shot Put", PW, "m", "Shot put distance"),
    _t("reactive_strength_index", "Reactive Strength Index", PW, "index", "Jump height over ground contact time"),
    _t("peak_power", "Peak Power (Wingate)", PW, "W/kg", "Wingate test peak power"),

    # ── Agility ───────────────────────────────────────────────────
    _t("illinois_agility", "Illinois Agility Test", AG, "s", "Illinois agility test time", False),
    _t("t_test", "T-Test", AG, "s", "T-test agility time", False),
    _t("shuttle_run_4x10", "Shuttle Run 4x10m", AG, "s", "4 x 10 metre shuttle run time", False),
    _t("shuttle_run_5x10", "Shuttle Run 5x10m", AG, "s", "5 x 10 metre shuttle run time", False),
    _t("hexagon", "Hexagon Test", AG, "s", "Hexagon agility test time", False),
    _t("pro_agility", "Pro Agility (5-10-5)", AG, "s", "Pro agility test time", False),
    _t("arrowhead", "Arrowhead Agility", AG, "s", "Arrowhead agility test time", False),
    _t("l_run", "L-Run (3-Cone)", AG, "s", "Three-cone drill time", False),
    _t("zig_zag", "Zig-Zag Run", AG, "s", "Zig-zag run time", False),
    _t("reactive_agility", "Reactive Agility Test", AG, "s", "Reactive agility test time", False),
]

# Auto-register all built-in tests
for _test in _TESTS:
    register_test(_test)

# ======================================================================
# Norms
# ======================================================================

AGE_FACTORS: dict[AgeBracket, float] = {
    AgeBracket.YOUTH: 0.9,
    AgeBracket.YOUNG_ADULT: 1.0,
    AgeBracket.ADULT: 0.95,
    AgeBracket.SENIOR: 0.85,
}

# test_id -> (male bands, female bands); bands ordered very_low .. very_good
_BASE_NORMS: dict[str, tuple[list[tuple[float, float]], list[tuple[float, float]]]] = {
    "squat_1rm": (
        [(0, 0.75), (0.75, 1.0), (1.0, 1.5), (1.5, 2.0), (2.0, 3.0)],
        [(0, 0.5), (0.5, 0.75), (0.75, 1.0), (1.0, 1.5), (1.5, 2.5)],
    ),
    "deadlift_1rm": (
        [(0, 1.0), (1.0, 1.5), (1.5, 2.0), (2.0, 2.5), (2.5, 3.5)],
        [(0, 0.75), (0.75, 1.0), (1.0, 1.5), (1.5, 2.0), (2.0, 3.0)],
    ),
    "bench_press_1rm": (
        [(0, 0.5), (0.5, 0.75), (0.75, 1.0), (1.0, 1.5), (1.5, 2.5)],
        [(0, 0.25), (0.25, 0.5), (0.5, 0.75), (0.75, 1.0), (1.0, 1.5)],
    ),
    "overhead_press_1rm": (
        [(0, 0.35), (0.35, 0.5), (0.5, 0.75), (0.75, 1.0), (1.0, 1.5)],
        [(0, 0.2), (0.2, 0.35), (0.35, 0.5), (0.5, 0.75), (0.75, 1.0)],
    ),
    "power_clean_1rm": (
        [(0, 0.5), (0.5, 0.75), (0.75, 1.0), (1.0, 1.25), (1.25, 2.0)],
        [(0, 0.35), (0.35, 0.5), (0.5, 0.75), (0.75, 1.0), (1.0, 1.5)],
    ),
    "grip_right": (
        [(0, 35), (35, 45), (45, 55), (55, 65), (65, 100)],
        [(0, 20), (20, 28), (28, 35), (35, 42), (42, 70)],
    ),
    "grip_left": (
        [(0, 32), (32, 42), (42, 52), (52, 62), (62, 95)],
        [(0, 18), (18, 25), (25, 32), (32, 40), (40, 65)],
    ),
    "back_dynamometer": (
        [(0, 90), (90, 120), (120, 150), (150, 180), (180, 250)],
        [(0, 50), (50, 70), (70, 95), (95, 120), (120, 170)],
    ),
    "leg_dynamometer": (
        [(0, 120), (120, 160), (160, 200), (200, 250), (250, 350)],
        [(0, 70), (70, 100), (100, 130), (130, 170), (170, 250)],
    ),
    "push_up": (
        [(0, 15), (15, 25), (25, 40), (40, 55), (55, 100)],
        [(0, 5), (5, 12), (12, 22), (22, 35), (35, 70)],
    ),
    "pull_up": (
        [(0, 3), (3, 7), (7, 12), (12, 18), (18, 35)],
        [(0, 0), (0, 2), (2, 5), (5, 10), (10, 20)],
    ),
    "sit_up": (
        [(0, 20), (20, 30), (30, 45), (45, 55), (55, 80)],
        [(0, 15), (15, 25), (25, 35), (35, 45), (45, 70)],
    ),
    "sprint_10m": (
        [(2.5, 3.0), (2.1, 2.5), (1.85, 2.1), (1.65, 1.85), (1.4, 1.65)],
        [(2.8, 3.3), (2.4, 2.8), (2.1, 2.4), (1.9, 2.1), (1.6, 1.9)],
    ),
    "sprint_20m": (
        [(4.0, 4.5), (3.5, 4.0), (3.1, 3.5), (2.8, 3.1), (2.4, 2.8)],
        [(4.5, 5.0), (4.0, 4.5), (3.5, 4.0), (3.2, 3.5), (2.8, 3.2)],
    ),
    "sprint_30m": (
        [(5.5, 6.0), (4.8, 5.5), (4.3, 4.8), (3.9, 4.3), (3.4, 3.9)],
        [(6.0, 6.5), (5.3, 6.0), (4.8, 5.3), (4.4, 4.8), (3.9, 4.4)],
    ),
    "sprint_40m": (
        [(6.8, 7.5), (6.0, 6.8), (5.4, 6.0), (5.0, 5.4), (4.4, 5.0)],
        [(7.5, 8.2), (6.7, 7.5), (6.0, 6.7), (5.5, 6.0), (4.9, 5.5)],
    ),
    "sprint_50m": (
        [(8.0, 8.8), (7.2, 8.0), (6.5, 7.2), (6.0, 6.5), (5.3, 6.0)],
        [(9.0, 9.8), (8.0, 9.0), (7.2, 8.0), (6.6, 7.2), (5.8, 6.6)],
    ),
    "sprint_60m": (
        [(9.5, 10.5), (8.5, 9.5), (7.6, 8.5), (7.0, 7.6), (6.2, 7.0)],
        [(10.5, 11.5), (9.5, 10.5), (8.5, 9.5), (7.8, 8.5), (6.8, 7.8)],
    ),
    "sprint_100m": (
        [(15.0, 17.0), (13.5, 15.0), (12.0, 13.5), (11.0, 12.0), (9.5, 11.0)],
        [(17.0, 19.0), (15.0, 17.0), (13.5, 15.0), (12.5, 13.5), (11.0, 12.5)],
    ),
    "flying_30m": (
        [(4.5, 5.0), (4.0, 4.5), (3.5, 4.0), (3.1, 3.5), (2.7, 3.1)],
        [(5.0, 5.5), (4.5, 5.0), (4.0, 4.5), (3.5, 4.0), (3.0, 3.5)],
    ),
    "reaction_time": (
        [(350, 500), (280, 350), (220, 280), (170, 220), (120, 170)],
        [(380, 520), (300, 380), (240, 300), (190, 240), (140, 190)],
    ),
    "tapping_speed": (
        [(0, 30), (30, 40), (40, 50), (50, 60), (60, 80)],
        [(0, 25), (25, 35), (35, 45), (45, 55), (55, 75)],
    ),
    "cooper_12min": (
        [(0, 1600), (1600, 2000), (2000, 2400), (2400, 2800), (2800, 4000)],
        [(0, 1200), (1200, 1600), (1600, 2000), (2000, 2400), (2400, 3500)],
    ),
    "beep_test": (
        [(0, 5), (5, 7), (7, 9), (9, 12), (12, 21)],
        [(0, 4), (4, 5.5), (5.5, 7), (7, 9), (9, 15)],
    ),
    "yo_yo_ir1": (
        [(0, 440), (440, 720), (720, 1040), (1040, 1560), (1560, 2800)],
        [(0, 280), (280, 440), (440, 680), (680, 1000), (1000, 2000)],
    ),
    "yo_yo_ir2": (
        [(0, 320), (320, 560), (560, 840), (840, 1200), (1200, 2000)],
        [(0, 200), (200, 360), (360, 520), (520, 760), (760, 1400)],
    ),
    "harvard_step": (
        [(0, 50), (50, 65), (65, 80), (80, 95), (95, 130)],
        [(0, 45), (45, 60), (60, 75), (75, 90), (90, 125)],
    ),
    "resting_hr": (
        [(85, 100), (75, 85), (65, 75), (55, 65), (40, 55)],
        [(90, 105), (80, 90), (70, 80), (60, 70), (45, 60)],
    ),
    "vo2max_estimated": (
        [(0, 35), (35, 42), (42, 50), (50, 58), (58, 80)],
        [(0, 28), (28, 35), (35, 42), (42, 50), (50, 70)],
    ),
    "sit_and_reach": (
        [(-20, 0), (0, 10), (10, 20), (20, 30), (30, 50)],
        [(-15, 5), (5, 15), (15, 25), (25, 35), (35, 55)],
    ),
    "shoulder_flexibility_right": (
        [(-30, -10), (-10, 0), (0, 10), (10, 20), (20, 40)],
        [(-25, -5), (-5, 5), (5, 15), (15, 25), (25, 45)],
    ),
    "shoulder_flexibility_left": (
        [(-30, -10), (-10, 0), (0, 10), (10, 20), (20, 40)],
        [(-25, -5), (-5, 5), (5, 15), (15, 25), (25, 45)],
    ),
    "trunk_rotation_right": (
        [(0, 30), (30, 40), (40, 50), (50, 60), (60, 80)],
        [(0, 35), (35, 45), (45, 55), (55, 65), (65, 85)],
    ),
    "trunk_rotation_left": (
        [(0, 30), (30, 40), (40, 50), (50, 60), (60, 80)],
        [(0, 35), (35, 45), (45, 55), (55, 65), (65, 85)],
    ),
    "hip_flexion": (
        [(0, 80), (80, 100), (100, 115), (115, 130), (130, 150)],
        [(0, 85), (85, 105), (105, 120), (120, 135), (135, 155)],
    ),
    "ankle_dorsiflexion": (
        [(0, 10), (10, 15), (15, 20), (20, 30), (30, 45)],
        [(0, 12), (12, 18), (18, 25), (25, 35), (35, 50)],
    ),
    "hamstring_flexibility": (
        [(0, 50), (50, 65), (65, 80), (80, 90), (90, 120)],
        [(0, 55), (55, 70), (70, 85), (85, 95), (95, 125)],
    ),
    "quadriceps_flexibility": (
        [(-20, -5), (-5, 0), (0, 5), (5, 10), (10, 20)],
        [(-15, 0), (0, 5), (5, 10), (10, 15), (15, 25)],
    ),
    "thomas_test": (
        [(0, -10), (-10, -5), (-5, 0), (0, 5), (5, 15)],
        [(0, -5), (-5, 0), (0, 5), (5, 10), (10, 20)],
    ),
    "vertical_jump": (
        [(0, 30), (30, 40), (40, 50), (50, 60), (60, 90)],
        [(0, 20), (20, 28), (28, 36), (36, 45), (45, 70)],
    ),
    "broad_jump": (
        [(0, 180), (180, 210), (210, 240), (240, 270), (270, 350)],
        [(0, 140), (140, 165), (165, 190), (190, 220), (220, 290)],
    ),
    "triple_hop": (
        [(0, 500), (500, 580), (580, 660), (660, 750), (750, 950)],
        [(0, 400), (400, 470), (470, 540), (540, 620), (620, 800)],
    ),
    "squat_jump": (
        [(0, 25), (25, 35), (35, 45), (45, 55), (55, 80)],
        [(0, 18), (18, 25), (25, 32), (32, 40), (40, 60)],
    ),
    "cmj": (
        [(0, 28), (28, 38), (38, 48), (48, 58), (58, 85)],
        [(0, 20), (20, 28), (28, 36), (36, 44), (44, 65)],
    ),
    "drop_jump": (
        [(0, 30), (30, 40), (40, 50), (50, 60), (60, 85)],
        [(0, 22), (22, 30), (30, 38), (38, 48), (48, 70)],
    ),
    "medicine_ball_throw": (
        [(0, 4), (4, 6), (6, 8), (8, 10), (10, 15)],
        [(0, 2.5), (2.5, 4), (4, 5.5), (5.5, 7), (7, 11)],
    ),
    "shot_put": (
        [(0, 6), (6, 8), (8, 10), (10, 13), (13, 20)],
        [(0, 4), (4, 5.5), (5.5, 7), (7, 9), (9, 14)],
    ),
    "reactive_strength_index": (
        [(0, 1.0), (1.0, 1.5), (1.5, 2.0), (2.0, 2.5), (2.5, 4.0)],
        [(0, 0.8), (0.8, 1.2), (1.2, 1.6), (1.6, 2.0), (2.0, 3.5)],
    ),
    "peak_power": (
        [(0, 8), (8, 10), (10, 12), (12, 14), (14, 20)],
        [(0, 6), (6, 8), (8, 10), (10, 12), (12, 17)],
    ),
    "illinois_agility": (
        [(20, 25), (17, 20), (15.5, 17), (14.5, 15.5), (12, 14.5)],
        [(22, 27), (19, 22), (17, 19), (16, 17), (13.5, 16)],
    ),
    "t_test": (
        [(13, 15), (11.5, 13), (10, 11.5), (9.2, 10), (7.5, 9.2)],
        [(14, 16), (12.5, 14), (11, 12.5), (10.2, 11), (8.5, 10.2)],
    ),
    "shuttle_run_4x10": (
        [(14, 16), (12.5, 14), (11, 12.5), (10, 11), (8.5, 10)],
        [(15, 17), (13.5, 15), (12, 13.5), (11, 12), (9.5, 11)],
    ),
    "shuttle_run_5x10": (
        [(17, 19), (15.5, 17), (14, 15.5), (12.5, 14), (10.5, 12.5)],
        [(18, 20), (16.5, 18), (15, 16.5), (13.5, 15), (11.5, 13.5)],
    ),
    "hexagon": (
        [(18, 22), (15, 18), (12.5, 15), (10.5, 12.5), (8, 10.5)],
        [(20, 24), (17, 20), (14, 17), (12, 14), (9, 12)],
    ),
    "pro_agility": (
        [(6, 7), (5.2, 6), (4.6, 5.2), (4.2, 4.6), (3.6, 4.2)],
        [(6.5, 7.5), (5.7, 6.5), (5.1, 5.7), (4.7, 5.1), (4.1, 4.7)],
    ),
    "arrowhead": (
        [(10, 11.5), (8.8, 10), (8, 8.8), (7.3, 8), (6.2, 7.3)],
        [(11, 12.5), (9.8, 11), (9, 9.8), (8.3, 9), (7.2, 8.3)],
    ),
    "l_run": (
        [(9, 10.5), (8, 9), (7.2, 8), (6.6, 7.2), (5.8, 6.6)],
        [(10, 11.5), (9, 10), (8.2, 9), (7.5, 8.2), (6.5, 7.5)],
    ),
    "zig_zag": (
        [(9, 10.5), (7.8, 9), (6.8, 7.8), (6, 6.8), (5, 6)],
        [(10, 11.5), (8.8, 10), (7.8, 8.8), (7, 7.8), (6, 7)],
    ),
    "reactive_agility": (
        [(2.5, 3.0), (2.1, 2.5), (1.8, 2.1), (1.5, 1.8), (1.2, 1.5)],
        [(2.8, 3.3), (2.4, 2.8), (2.0, 2.4), (1.7, 2.0), (1.4, 1.7)],
    ),
}


def _norm_range(bands: list[tuple[float, float]]) -> NormRange:
    return NormRange(**{tier.value: band for tier, band in zip(NormTier, bands)})


def build_norm_table(base_norms: Optional[dict] = None, age_factors: Optional[dict[AgeBracket, float]] = None,
                     version: str = NORM_TABLE_VERSION, ) -> NormTable:
    """Expand per-sex base bands into a full ``(test, sex, bracket)`` table.

    The young-adult bracket keeps the base bands unchanged; the other
    brackets are the base bands scaled by their age factor.
    """
    base_norms = _BASE_NORMS if base_norms is None else base_norms
    age_factors = AGE_FACTORS if age_factors is None else age_factors

    entries: dict[str, dict[Sex, dict[AgeBracket, NormRange]]] = {}
    for test_id, (male, female) in base_norms.items():
        entries[test_id] = {}
        for sex, bands in ((Sex.MALE, male), (Sex.FEMALE, female)):
            base = _norm_range(bands)
            entries[test_id][sex] = {
                bracket: base if factor == 1.0 else base.scaled(factor) for bracket, factor in age_factors.items()
            }
    return NormTable(version=version, entries=entries)


DEFAULT_NORM_TABLE = build_norm_table()
