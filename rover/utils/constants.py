"""Mission configuration constants."""

# Grid dimensions
MAP_SIZE = 12  # 12x12 grid

# Mission timeline
TOTAL_HOURS = 14 * 24  # 14 Earth days of lunar daylight
HOURS_PER_DAY = 24

# Rover budgets
START_POWER = 100.0  # percent
MAX_POWER = 100.0
MAX_DATA_BUFFER = 100.0  # MB
MAX_RESOURCE_POTENTIAL = 100.0

# Repeating relay windows via Vikram (hour-of-day start, duration in hours)
COMM_WINDOW_HOURS = (
    (2, 2),
    (10, 2),
    (18, 2),
)

# Passive power dynamics
MAX_SOLAR_CHARGE = 2.0  # percent per hour at full irradiance
IDLE_DRAIN = 0.15  # percent per hour

# Movement
BASE_MOVE_COST = 1.0
SLOPE_PENALTY = 1.0
BOULDER_PENALTY = 0.5
PSR_PENALTY = 3.0  # shadow penalty
POWER_RESERVE = 1.0  # every action must leave at least this much
WHEEL_SLIP_PROB = 0.15
WHEEL_SLIP_HOURS = 2
WHEEL_SLIP_POWER = 2.0

# Instruments: (power cost, hours)
INSTRUMENTS = {
    "APXS": (3.0, 2),
    "LIBS": (4.0, 3),
}

# Spectrum analysis
MIN_TARGET_ELEMENTS = 3
SCIENCE_GAIN_RANGE = (5, 10)  # MB per identified element
PSR_RESOURCE_GAIN = 6.0
BASE_RESOURCE_GAIN = 2.0
MAP100_BUFFER_THRESHOLD = 60.0

# Element catalog (key, display name)
ELEMENTS = (
    ("O", "Oxygen"),
    ("Si", "Silicon"),
    ("Ca", "Calcium"),
    ("Fe", "Iron"),
    ("S", "Sulfur"),
    ("Mg", "Magnesium"),
)
SULFUR_KEY = "S"

# Transmission
MAX_TRANSMIT_POWER = 5
TRANSMIT_POWER_DIVISOR = 20  # MB per power unit
TRANSMIT_HOURS_DIVISOR = 40  # MB per extra hour

# Map generation
CRATER_COUNT_RANGE = (3, 5)
CRATER_RADIUS_RANGE = (1, 2)
PSR_COUNT_RANGE = (18, 25)
PSR_BIAS_PROB = 0.4
ROUGH_COUNT = 40
LANDER_SCIENCE = 1
RIM_SCIENCE = 2
CRATER_SCIENCE = 1
PSR_EDGE_SCIENCE = 2

# Hibernation / wake
FLAT_WAKE_BASE = 0.35
ROUGH_WAKE_BASE = 0.15
WAKE_SKILL_WEIGHT = 0.5
MAX_WAKE_PROB = 0.85
TIMING_CENTER = 55.0
TIMING_GREEN_BAND = (45.0, 65.0)  # exclusive bounds

# Host pacing
DEFAULT_TICK_RATE = 4  # ticks (mission hours) per second
TICK_RATE_RANGE = (1, 10)
PATH_STEP_DELAY = 0.22  # seconds between queued steps

# Mission API server
SERVER_HOST = "0.0.0.0"
SERVER_PORT = 8137  # Default port for run_server.py

# Testing
RNG_SEED_DEFAULT = 1337  # Default mission seed
