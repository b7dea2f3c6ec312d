"""
settings.py - Game constants for Orb Hunter.

All configurable values live here so they're easy to tweak
and easy to reference from any module.
"""

# ── Screen ────────────────────────────────────────────────
SCREEN_WIDTH = 960
SCREEN_HEIGHT = 640
FPS = 60
TITLE = "Orb Hunter"
BG_COLOR = (26, 26, 46)        # '#1a1a2e'

# ── Simulation clock ──────────────────────────────────────
TICK_RATE = 60                 # fixed simulation ticks per second
TICK_SECONDS = 1.0 / TICK_RATE
MAX_TICKS_PER_FRAME = 5        # catch-up cap after a long frame

# ── Colors (R, G, B) ─────────────────────────────────────
WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
GRAY = (60, 60, 60)
PLAYER_COLOR = (138, 109, 255)     # '#8a6dff'
ENEMY_COLOR = (255, 68, 68)        # '#ff4444'
ORB_COLOR = (255, 220, 60)
HUD_COLOR = (220, 220, 240)
HINT_COLOR = (140, 140, 140)

# ── Player ────────────────────────────────────────────────
PLAYER_SPEED = 3               # units per tick
PLAYER_SIZE = 30

# ── Enemies / orbs ────────────────────────────────────────
PURSUIT_STEP = 1.0             # units per tick toward the player
DESPAWN_MARGIN = 50            # units beyond a canvas edge before removal
ORB_SIZE = 10
ORB_SIZE_LIMIT = 20            # legacy size rule: width < 20 is an orb
ORB_SPAWN_CHANCE = 0.01        # per tick
ENEMY_SIZE = 30
ENEMY_SPAWN_CHANCE = 0.005     # per tick; 0 disables enemy spawns

# ── Progression ───────────────────────────────────────────
HEALTH_PER_VITALITY = 10
ORB_EXPERIENCE = 10
ENEMY_DAMAGE = 10
INITIAL_EXPERIENCE_THRESHOLD = 100
EXPERIENCE_GROWTH = 1.2
LEVEL_UP_VITALITY = 1

# Base attributes per archetype: strength, dexterity, intelligence, vitality
CLASS_STATS = {
    "warrior": {"strength": 10, "dexterity": 5, "intelligence": 3, "vitality": 12},
    "mage":    {"strength": 3, "dexterity": 6, "intelligence": 12, "vitality": 6},
    "rogue":   {"strength": 5, "dexterity": 12, "intelligence": 5, "vitality": 8},
    "priest":  {"strength": 4, "dexterity": 7, "intelligence": 10, "vitality": 9},
    "archer":  {"strength": 6, "dexterity": 11, "intelligence": 6, "vitality": 7},
}

CLASS_DESCRIPTIONS = {
    "warrior": "Heavy armour and the deepest health pool.",
    "mage":    "Fragile scholar of the arcane.",
    "rogue":   "Quick hands, light on their feet.",
    "priest":  "Steady faith and a sturdy spirit.",
    "archer":  "Keen eyes and a nimble stance.",
}

# ── Headless simulation ───────────────────────────────────
SIMULATION_MAX_TICKS = 60 * 60 * 5     # 5 minutes of game time per run
SIMULATION_DIRECTION_HOLD = 45         # ticks a scripted direction is held

# ── Reports ───────────────────────────────────────────────
TREND_SAMPLE_INTERVAL = 60     # ticks between health/level samples
TREND_GRAPH_FILE = "run_trend.png"

# ── Font ──────────────────────────────────────────────────
FONT_SIZE = 26
SMALL_FONT_SIZE = 20
