
from codec import pack, unpack, format_bits, to_bytes as encode_wire, from_bytes as decode_wire
from definitions import GENE_BITS, MUTATION_TRIES, DEFAULT_MUTATION_RATE
from random_source import draw_byte, draw_below


class Gene:
    def __init__(self, source, weight, bias, sink):
        # source: neuron the connection starts from (0-255)
        # weight, bias: raw bytes, interpreted by whoever evaluates the genome
        # sink: neuron the connection ends at (0-255)
        self._set_packed(pack((source, weight, bias, sink)))

    def _set_packed(self, packed):
        # The only place fields get written, so packed and fields never diverge
        self.packed = packed
        self.source, self.weight, self.bias, self.sink = unpack(packed)

    @classmethod
    def from_fields(cls, fields):
        """Create a gene from a (source, weight, bias, sink) tuple"""
        return cls(*fields)

    @classmethod
    def from_int(cls, packed):
        """Decode from 32-bit integer"""
        return cls(*unpack(packed))

    @classmethod
    def from_bytes(cls, data):
        """Decode from the 4-byte wire form (source, weight, bias, sink)"""
        return cls.from_int(decode_wire(data))

    @classmethod
    def random(cls, source):
        """Create a random gene: 4 independent uniform bytes, in field order"""
        return cls(draw_byte(source),
            draw_byte(source),
            draw_byte(source),
            draw_byte(source))

    def to_fields(self):
        return (self.source, self.weight, self.bias, self.sink)

    def to_int(self):
        return self.packed

    def to_hex(self):
        return f"{self.packed:08x}"

    def to_bits(self):
        return format_bits(self.packed)

    def to_bytes(self):
        return encode_wire(self.packed)

    def copy(self):
        """Return a deep copy of this gene"""
        return Gene(self.source, self.weight, self.bias, self.sink)

    def mutate(self, source, probability_per_mille=DEFAULT_MUTATION_RATE):
        """
        Flip one random bit with probability probability_per_mille / 1000.

        One draw in [0, MUTATION_TRIES) decides; a second picks the bit.
        Returns True if the gene changed.
        """
        if probability_per_mille < 0:
            raise ValueError(f"mutation rate must be >= 0, got {probability_per_mille}")
        if draw_below(source, MUTATION_TRIES) >= probability_per_mille:
            return False
        self.mutate_deterministic(source)
        return True

    def mutate_deterministic(self, source):
        """Flip a single random bit, unconditionally. Returns the bit position."""
        bit = draw_below(source, GENE_BITS)
        self._set_packed(self.packed ^ (1 << bit))
        return bit

    def __eq__(self, other):
        if not isinstance(other, Gene):
            return NotImplemented
        return self.packed == other.packed

    # mutable, so not hashable
    __hash__ = None

    def __repr__(self):
        return f"Gene(source={self.source}, weight={self.weight}, bias={self.bias}, sink={self.sink})"
