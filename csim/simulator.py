import enum

from csim.cache import Cache
from csim.summary import formatSummary


class Outcome(enum.Enum):
    HIT = "hit"
    MISS = "miss"
    MISS_EVICTION = "miss eviction"


class Stats:

    def __init__(self):
        self.hits = 0
        self.misses = 0
        self.evictions = 0

    def asTuple(self):
        return (self.hits, self.misses, self.evictions)

    def __eq__(self, other):
        if isinstance(other, Stats):
            return self.asTuple() == other.asTuple()
        return NotImplemented

    def __str__(self):
        return formatSummary(*self.asTuple())

    def __repr__(self):
        return "Stats(%s)"%self


class Simulator:


    def __init__(self, setBits=4, associativity=1, blockBits=4):
        """LRU cache simulation: one cache, its clock and its statistics.

        Parameters
        ----------

        setBits (int):
            Number of set index bits (s).
        associativity (int):
            Number of lines per set (E).
        blockBits (int):
            Number of block offset bits (b).
        """
        self.cache = Cache(setBits, associativity, blockBits)
        self.counter = 0
        self.stats = Stats()

    def access(self, address):
        """Access a given address.

        Parameters
        ----------
        address (int):
            The address which is accessed.

        Returns the Outcome of the access, the statistics are updated accordingly.
        """
        tag, setIndex = self.cache.decompose(address)
        lines = self.cache.getSet(setIndex)

        for line in lines:
            if line.valid and line.tag == tag:
                self.stats.hits += 1
                self.accessDirect(line)
                return Outcome.HIT

        self.stats.misses += 1
        for line in lines:
            if not line.valid:
                line.valid = True
                line.tag = tag
                self.accessDirect(line)
                return Outcome.MISS

        victim = self.selectEviction(lines)
        victim.tag = tag
        self.accessDirect(victim)
        self.stats.evictions += 1
        return Outcome.MISS_EVICTION

    def accessDirect(self, line):
        self.counter += 1
        line.lastAccess = self.counter

    def selectEviction(self, lines):
        """Least recently used line among `lines`, which must all be valid."""
        victim = lines[0]
        for line in lines[1:]:
            if line.lastAccess < victim.lastAccess:
                victim = line
        return victim
