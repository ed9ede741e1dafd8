from gene import Gene
from definitions import GENOME_SIZE, DEFAULT_MUTATION_RATE


class Genome:
    def __init__(self, genome_id: int, genes: list[Gene]):
        if len(genes) != GENOME_SIZE:
            raise ValueError(f"a genome holds exactly {GENOME_SIZE} genes, got {len(genes)}")
        if len({id(g) for g in genes}) != len(genes):
            raise ValueError("a genome owns each of its genes; the same Gene object appears twice")
        self.id = genome_id
        self.genes = list(genes)

    @classmethod
    def random(cls, source, allocator):
        """Draw a fresh id, then GENOME_SIZE random genes in order"""
        genome_id = allocator.next_id()
        genes = []
        for _ in range(GENOME_SIZE):
            genes.append(Gene.random(source))
        return cls(genome_id, genes)

    # ── Mutation passes ──
    # Each walks the genes in storage order so a seeded source replays exactly.
    # All return how many genes changed.

    def mutate_on_rate(self, source, probability_per_mille):
        """Point mutations at a caller-chosen rate (per mille, per gene)"""
        changed = 0
        for gene in self.genes:
            if gene.mutate(source, probability_per_mille):
                changed += 1
        return changed

    def mutate_uniform_random(self, source):
        """Point mutations at the default rate"""
        return self.mutate_on_rate(source, DEFAULT_MUTATION_RATE)

    def mutate_deterministic(self, source):
        """Flip one bit in every gene"""
        for gene in self.genes:
            gene.mutate_deterministic(source)
        return len(self.genes)

    # ── Copies ──

    def copy(self):
        """Deep copy that keeps the same id"""
        return Genome(self.id, [g.copy() for g in self.genes])

    def copy_with_new_id(self, allocator):
        """Deep copy registered as a new individual"""
        return Genome(allocator.next_id(), [g.copy() for g in self.genes])

    # ── Read-only views ──

    def packed_values(self):
        return [gene.packed for gene in self.genes]

    def field_values(self):
        return [gene.to_fields() for gene in self.genes]

    def hamming_distance(self, other):
        """Number of differing bits across all genes, position by position"""
        return sum(bin(a.packed ^ b.packed).count("1") for a, b in zip(self.genes, other.genes))

    def __len__(self):
        return len(self.genes)

    def __iter__(self):
        return iter(self.genes)

    def __eq__(self, other):
        if not isinstance(other, Genome):
            return NotImplemented
        return self.id == other.id and self.genes == other.genes

    __hash__ = None

    def __str__(self):
        """Pretty print the genome"""
        return ", ".join(gene.to_hex() for gene in self.genes)

    def __repr__(self):
        return f"Genome(id={self.id}, genes=[{self}])"
