"""Visual identity constants for the creature generator.

Every number here feeds straight into the rendered creature. Changing any of
them changes the appearance of every existing genome, so treat this module
as frozen once creatures are in circulation.
"""

# ── Genome byte slots ──

# Fallback value per slot b0..b10, used when the genome and seed are both
# empty. Together they define the default organism.
FALLBACK_BYTES = (90, 140, 200, 30, 220, 60, 180, 40, 210, 120, 15)

# ── Hue derivation ──

HUE_CIRCLE = 360
HUE_BYTE_SCALE = 3
# Palette jitter: (b9 % 60) - 30 gives ±30°.
PALETTE_SHIFT_SPAN = 60
PALETTE_SHIFT_OFFSET = 30
SECONDARY_HUE_OFFSET = 90
TERTIARY_HUE_OFFSET = 180
HUE_PER_LEVEL = 7
HUE_PER_STAGE = 19

# ── Shape derivation: (modulus, offset, min, max) ──

EYE_MOD = 10
EYE_OFFSET = 4
EYE_MIN, EYE_MAX = 4, 12

CORE_MOD = 18
CORE_OFFSET = 10
CORE_PER_LEVEL = 0.6
CORE_MIN, CORE_MAX = 10, 26
# Levels beyond this no longer move core_radius off its clamp bounds.
CORE_LEVEL_SPAN = 100

MIN_SPIKES = 7
SPIKE_MOD = 9
# Renderable limits: beyond these the ring would need more memory than any
# avatar warrants (and huge twists overflow float math).
MAX_SPIKES = 1024
MAX_TWIST = MAX_SPIKES * 3

TWIST_MOD = 30
TWIST_OFFSET = 15
TWIST_PER_STAGE = 3

WOBBLE_MOD = 14
WOBBLE_OFFSET = 6

AURA_MOD = 30
AURA_OFFSET = 18
AURA_MIN, AURA_MAX = 18, 42

VARIANT_COUNT = 3

# ── Geometry ──

# Base radius as a fraction of the output size.
BASE_RADIUS_FRACTION = 0.38
# Silhouette radius = base * (0.82 + sin(...) * 0.18).
SILHOUETTE_MEAN = 0.82
SILHOUETTE_AMPLITUDE = 0.18
TWIST_ANGLE_SCALE = 0.01

TENTACLE_COUNT = 6
TENTACLE_INNER = 0.4
TENTACLE_OUTER = 1.05
TENTACLE_CONTROL = 1.15
TENTACLE_CONTROL_MOD = 5
TENTACLE_CONTROL_STEP = 0.05

SHELL_OUTER = 1.0
SHELL_INNER = 0.65
# Arc ends this many units left of its start, leaving a crescent gap.
SHELL_GAP = 1.0

# Ear triangle as (dx, dy) multiples of the base radius; mirrored for the right ear.
EAR_POINTS = ((0.35, -0.15), (0.95, -0.9), (0.2, -0.4))
TAIL_START = (0.8, 0.6)
TAIL_CONTROL = (1.2, 1.1)
TAIL_END = (0.4, 1.1)

# Composition circles.
AURA_GLOW_SCALE = 0.15
BODY_CIRCLE = 0.92

# ── Palette: (saturation %, lightness %) pairs ──

HIGHLIGHT_SL = (70, 65)
BODY_SL = (60, 45)
SHADOW_SL = (60, 25)
GLOW_INNER_SL = (85, 75)
GLOW_OUTER_SL = (60, 30)
SHELL_LIGHT_SL = (55, 55)
SHELL_DARK_SL = (45, 25)
SILHOUETTE_SL = (38, 22)
CORE_SL = (80, 70)
TENTACLE_SL = (60, 50)
INNER_SHELL_SL = (35, 35)
EAR_SL = (55, 30)
TAIL_SL = (60, 45)
EYE_COLOR = "#0e1016"

GLOW_INNER_OPACITY = 0.7
SILHOUETTE_OPACITY = 0.65
# Ornament group opacity per variant.
ORNAMENT_OPACITY = (0.7, 0.8, 0.9)

# ── Stroke widths ──

TENTACLE_STROKE = 3
SHELL_OUTER_STROKE = 8
SHELL_INNER_STROKE = 5
TAIL_STROKE = 4
