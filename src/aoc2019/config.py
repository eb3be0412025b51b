from dataclasses import dataclass

# =============================================================================
# Configuration Constants
# =============================================================================

FIRST_DAY = 1
LAST_DAY = 25


@dataclass
class PuzzleConfig:
    """Fixed puzzle parameters used by the day drivers."""
    image_width: int = 25             # Day 8
    image_height: int = 6             # Day 8
    gravity_noun: int = 12            # Day 2, "1202 program alarm"
    gravity_verb: int = 2             # Day 2
    gravity_target: int = 19690720    # Day 2, part B
    air_conditioner_id: int = 1       # Day 5, part A
    thermal_radiator_id: int = 5      # Day 5, part B
    boost_test_mode: int = 1          # Day 9, part A
    boost_sensor_mode: int = 2        # Day 9, part B
    orbit_origin: str = "YOU"         # Day 6
    orbit_destination: str = "SAN"    # Day 6


DEFAULT_CONFIG = PuzzleConfig()
