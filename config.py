"""
Simulation tuning knobs.
"""

# World (half extents; the arena spans [-W, W] x [-H, H] around the origin)
WORLD_W = 1305.0
WORLD_H = 730.0

# Population controls
NUM_BOIDS = 100
NUM_PREDATORS = 10
NUM_FOOD = 600
NUM_POISON = 150

# Health + metabolism
MAX_HEALTH = 100.0
BASE_DAMAGE = 4.0
HEALTH_TICK_INTERVAL = 0.5  # seconds
BOID_COLLISION_RADIUS = 8.0

# Predators
BOID_NUTRITION = 30.0  # health a predator gains per kill
PREDATOR_COLLISION_RADIUS = 10.0

# Replication (agents)
REPLICATE_INTERVAL = 5.0
REPLICATE_PROBABILITY = 0.2
BOID_REPLICATE_HEALTH_FRACTION = 1.0 / 2.0
PREDATOR_REPLICATE_HEALTH_FRACTION = 1.0 / 3.0

# Mutation
MUTATION_PROBABILITY = 0.2
MUTATION_STEP = 0.1
STEERING_MUTATION_SCALE = 0.01
RADIUS_MUTATION_SCALE = 50.0

# Genome init ranges
STEERING_FORCE_RANGE = (0.0005, 0.005)
SPEED_RANGE = (0.5, 1.5)
PULL_RANGE = (-1.5, 1.5)
PERCEPTION_RANGE = (50.0, 120.0)
PREY_PERCEPTION_RANGE = (30.0, 100.0)
PREY_PULL_RANGE = (-1.0, 1.0)

# Steering
SEPARATION_RADIUS_SQ = 20.0
SEPARATION_WEIGHT = -0.01
BOUNDARY_WEIGHT = 0.001

# Consumables
FOOD_NUTRITION = 5.0
POISON_DAMAGE = -30.0
NUTRITION_FLOOR = 0.1
FOOD_DECAY_RATE = -0.1
POISON_DECAY_RATE = 0.5
CONSUMABLE_DECAY_INTERVAL = 1.5
CONSUMABLE_REPLICATION_INTERVAL = 0.2
REPLICATION_COOLDOWN = 2.0
REPLICATION_GATE = 0.8  # draws below this skip replication
CENTER_BIAS_SCALE = 1_000_000.0
REPLICATION_RADIUS_FOOD = 40.0
REPLICATION_RADIUS_POISON = 5.0
POISON_TO_FOOD_PROBABILITY = 0.4

# Corpses
CORPSE_SCATTER = 30.0
CORPSE_ITEMS_RANGE = (2, 4)  # inclusive
CORPSE_POISON_PROBABILITY = 0.15

# Runtime pacing
REPOPULATE_INTERVAL = 5.0
STAT_COLLECTION_INTERVAL = 1.0
MAX_NUM_POINTS = 8000

# Presentation
SCREEN_W, SCREEN_H = 1600, 1000
FPS = 60
