import logging

from csim.address import decompose

log = logging.getLogger(__name__)


class ConfigurationError(ValueError):
    pass


class ResourceError(MemoryError):
    pass


class CacheLine:

    def __init__(self):
        self.valid = False
        self.tag = 0
        self.lastAccess = 0

    def __repr__(self):
        return "CacheLine(valid=%r, tag=%#x, lastAccess=%d)"%(self.valid, self.tag, self.lastAccess)


class Cache:


    def __init__(self, setBits=4, associativity=1, blockBits=4):
        """Storage for a set associative cache.

        Only holds the lines, the replacement policy lives in the Simulator.

        Parameters
        ----------

        setBits (int):
            Number of set index bits, the cache has 2**setBits sets. (Default 4)
        associativity (int):
            Number of lines (ways) per set. (Default 1, direct mapped)
        blockBits (int):
            Number of block offset bits, the block size is 2**blockBits bytes. (Default 4)
        """
        for name, value in (("setBits", setBits), ("associativity", associativity), ("blockBits", blockBits)):
            if not isinstance(value, int) or value < 1:
                raise ConfigurationError("%s must be a positive integer, got %r"%(name, value))

        self.setBits = setBits
        self.associativity = associativity
        self.blockBits = blockBits

        self.nSets = 1 << self.setBits
        self.blockSize = 1 << self.blockBits
        self.nLines = self.nSets * self.associativity

        try:
            lines = [None] * self.nLines
            for i in range(self.nLines):
                lines[i] = CacheLine()
        except (MemoryError, OverflowError) as e:
            raise ResourceError("Cannot allocate cache of %d sets x %d lines"%(self.nSets, self.associativity)) from e
        self.lines = lines

        log.debug("cache: %d sets, %d ways, %d byte blocks", self.nSets, self.associativity, self.blockSize)

    def decompose(self, address):
        return decompose(address, self.blockBits, self.setBits)

    def getSet(self, setIndex):
        """The lines of one set, in way order.

        The returned list holds the cache's own CacheLine objects, changing them changes the cache.
        """
        if not 0 <= setIndex < self.nSets:
            raise IndexError("set index %d out of range for %d sets"%(setIndex, self.nSets))
        start = setIndex * self.associativity
        return self.lines[start:start + self.associativity]
