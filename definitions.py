# Bit layout of a packed gene: source | weight | bias | sink
SOURCE_ID_BITMASK = 0xFF << 24
SOURCE_W_BITMASK = 0xFF << 16
SOURCE_B_BITMASK = 0xFF << 8
SINK_ID_BITMASK = 0xFF

FIELD_BITMASKS = (SOURCE_ID_BITMASK, SOURCE_W_BITMASK, SOURCE_B_BITMASK, SINK_ID_BITMASK)
FIELD_SHIFTS = (24, 16, 8, 0)

BYTE_MAX = 0xFF
GENE_BITS = 32
GENE_MAX = (1 << GENE_BITS) - 1

GENOME_SIZE = 16  # genes per genome, fixed for every instance

# Mutation chance is expressed per mille: draw in [0, MUTATION_TRIES),
# mutate when the draw is below the rate.
MUTATION_TRIES = 1000
DEFAULT_MUTATION_RATE = 1

ID_MAX = GENE_MAX  # identifiers are 32-bit
