"""
simulation.py — The headless generation loop.

Ties together: IdAllocator, Genome, Gene and a randomness source.

The loop is simple:
    1. Spawn a population of random genomes (each gets a fresh id)
    2. Each generation, run one mutation pass over every genome
    3. Record how much the population drifted
    4. Go to 2

Whatever draws the population (a window, a notebook, a plot) only ever
calls snapshot() / field_snapshot() and gets a copy back. It has no way
to change the simulation.
"""

from enum import IntEnum

import numpy as np

from definitions import GENOME_SIZE, DEFAULT_MUTATION_RATE
from genome import Genome
from id_allocator import IdAllocator
from random_source import RandomSource


# ── Mutation policies ──────────────────────────────────────────
# UNIFORM:       every gene flips a bit with the default 1/1000 chance
# DETERMINISTIC: every gene flips exactly one bit, every generation
# ON_RATE:       every gene flips a bit with mutation_rate/1000 chance

class MutationPolicy(IntEnum):
    UNIFORM = 0
    DETERMINISTIC = 1
    ON_RATE = 2


class Simulation:

    def __init__(
        self,
        population_size=100,                    # genomes per generation
        mutation_policy=MutationPolicy.UNIFORM,
        mutation_rate=DEFAULT_MUTATION_RATE,    # per mille, only used by ON_RATE
        seed=None,                              # seeds the default RandomSource
        random_source=None,                     # overrides seed when given
        allocator=None,                         # share one to keep ids unique across simulations
        verbose=True,                           # print a line per generation
    ):
        if population_size < 1:
            raise ValueError(f"population_size must be >= 1, got {population_size}")
        if mutation_rate < 0:
            raise ValueError(f"mutation_rate must be >= 0, got {mutation_rate}")

        self.population_size = population_size
        self.mutation_policy = MutationPolicy(mutation_policy)
        self.mutation_rate = mutation_rate
        self.verbose = verbose

        self.random_source = random_source if random_source is not None else RandomSource(seed)
        self.allocator = allocator if allocator is not None else IdAllocator()

        # ── Population ──
        self.genomes: list[Genome] = []

        # ── Tracking ──
        self.generation = 0

        # ── History ──
        # One dict per completed generation.
        self.history: list[dict] = []

    # ══════════════════════════════════════════════════════════════
    # SPAWN
    # ══════════════════════════════════════════════════════════════

    def spawn_generation(self):
        """Replace the population with population_size random genomes"""
        self.genomes = [
            Genome.random(self.random_source, self.allocator)
            for _ in range(self.population_size)
        ]
        self.generation = 0

    # ══════════════════════════════════════════════════════════════
    # MUTATE
    # ══════════════════════════════════════════════════════════════

    def _mutate(self, genome):
        if self.mutation_policy == MutationPolicy.DETERMINISTIC:
            return genome.mutate_deterministic(self.random_source)
        elif self.mutation_policy == MutationPolicy.ON_RATE:
            return genome.mutate_on_rate(self.random_source, self.mutation_rate)
        return genome.mutate_uniform_random(self.random_source)

    def run_one_generation(self):
        """
        One mutation pass over the whole population, in population order.

        Returns a stats dict for this generation.
        """
        if not self.genomes:
            self.spawn_generation()

        before = [genome.copy() for genome in self.genomes]

        mutated_genes = 0
        for genome in self.genomes:
            mutated_genes += self._mutate(genome)

        population = len(self.genomes)
        total_genes = population * GENOME_SIZE
        distance = sum(g.hamming_distance(b) for g, b in zip(self.genomes, before))

        stats = {
            "generation": self.generation,
            "mutated_genes": mutated_genes,
            "mutation_fraction": mutated_genes / total_genes,
            "mean_hamming_distance": distance / population,
        }

        if self.verbose:
            print(
                f"Gen {self.generation:4d} | "
                f"Mutated genes: {mutated_genes:5d}/{total_genes} "
                f"({stats['mutation_fraction']:5.1%}) | "
                f"Mean drift: {stats['mean_hamming_distance']:.2f} bits"
            )

        self.history.append(stats)
        self.generation += 1
        return stats

    def run(self, num_generations=100):
        """
        Run several generations headless.

        Usage:
            sim = Simulation(seed=1)
            sim.spawn_generation()
            sim.run(200)
        """
        for _ in range(num_generations):
            self.run_one_generation()

    # ══════════════════════════════════════════════════════════════
    # SNAPSHOTS (for display)
    # ══════════════════════════════════════════════════════════════

    def snapshot(self):
        """Packed genes as a (population, GENOME_SIZE) uint32 array"""
        packed = [genome.packed_values() for genome in self.genomes]
        return np.array(packed, dtype=np.uint32).reshape(len(self.genomes), GENOME_SIZE)

    def field_snapshot(self):
        """Gene fields as a (population, GENOME_SIZE, 4) uint8 array"""
        fields = [genome.field_values() for genome in self.genomes]
        return np.array(fields, dtype=np.uint8).reshape(len(self.genomes), GENOME_SIZE, 4)

    def genome_ids(self):
        return [genome.id for genome in self.genomes]


# ══════════════════════════════════════════════════════════════════
# Run it
# ══════════════════════════════════════════════════════════════════

if __name__ == "__main__":
    print("=== Genome Simulator ===")
    print()

    sim = Simulation(
        population_size=200,
        mutation_policy=MutationPolicy.ON_RATE,
        mutation_rate=50,
        seed=42,
    )

    print(f"Population: {sim.population_size}")
    print(f"Genes:      {GENOME_SIZE}")
    print(f"Policy:     {sim.mutation_policy.name}")
    print(f"Rate:       {sim.mutation_rate}/1000")
    print("-" * 60)

    sim.spawn_generation()
    sim.run(num_generations=20)

    print("-" * 60)
    print(f"Genome {sim.genomes[0].id}: {sim.genomes[0]}")
    print(f"Ids issued: {sim.allocator.current_value()}")
