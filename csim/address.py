def decompose(address, blockBits, setBits):
    """Split an address into its tag and set index.

    Parameters
    ----------
    address (int):
        The byte address being accessed.
    blockBits (int):
        Number of block offset bits, the block size is 2**blockBits bytes.
    setBits (int):
        Number of set index bits, the cache has 2**setBits sets.

    Returns
    -------
    (tag, setIndex) tuple. The block offset is dropped, it never matters for hit/miss.
    """
    blockSize = 1 << blockBits
    nSets = 1 << setBits
    setIndex = (address // blockSize) % nSets
    tag = address // (blockSize * nSets)
    return tag, setIndex


def blockAddress(tag, setIndex, blockBits, setBits):
    """First byte address of the block identified by `tag` and `setIndex`."""
    blockSize = 1 << blockBits
    nSets = 1 << setBits
    return tag * blockSize * nSets + setIndex * blockSize
