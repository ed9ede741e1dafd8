class FixedSource:
    """Replays fixed byte and integer sequences, for exact-outcome tests"""

    def __init__(self, bytes_=(), belows=()):
        self.bytes = list(bytes_)
        self.belows = list(belows)

    def random_byte(self):
        return self.bytes.pop(0)

    def random_below(self, n):
        return self.belows.pop(0)
