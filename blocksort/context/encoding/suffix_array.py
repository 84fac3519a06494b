"""
Circular suffix array for the Burrows-Wheeler Transform

A circular suffix array describes the sorted order of the N rotations of a
buffer of length N. For "ABRACADABRA!":

     i    Original Suffixes          Sorted Suffixes        index[i]
    --    -----------------------    -----------------------  --------
     0    A B R A C A D A B R A !    ! A B R A C A D A B R A    11
     1    B R A C A D A B R A ! A    A ! A B R A C A D A B R    10
     2    R A C A D A B R A ! A B    A B R A ! A B R A C A D     7
     3    A C A D A B R A ! A B R    A B R A C A D A B R A !     0
     4    C A D A B R A ! A B R A    A C A D A B R A ! A B R     3
     5    A D A B R A ! A B R A C    A D A B R A ! A B R A C     5
     6    D A B R A ! A B R A C A    B R A ! A B R A C A D A     8
     7    A B R A ! A B R A C A D    B R A C A D A B R A ! A     1
     8    B R A ! A B R A C A D A    C A D A B R A ! A B R A     4
     9    R A ! A B R A C A D A B    D A B R A ! A B R A C A     6
    10    A ! A B R A C A D A B R    R A ! A B R A C A D A B     9
    11    ! A B R A C A D A B R A    R A C A D A B R A ! A B     2

index[i] = j means the rotation starting at offset j has rank i.

Sorting uses 3-way string quicksort keyed on the byte at (index[k] + d) mod N,
switching to insertion sort for small sub-ranges. The work list is an explicit
stack because equal buckets of a repetitive buffer go up to N levels deep.

Rotations of a periodic buffer compare equal byte for byte. Such ties are
resolved by comparing the wrapped positions the two scans stop at, which
gives a fixed order that decoding relies on.
"""

from typing import List

# Sub-ranges of at most CUTOFF + 1 entries are insertion-sorted
CUTOFF = 11


class CircularSuffixArray:
    """Sorted order of the circular suffixes (rotations) of a byte buffer"""

    def __init__(self, text: bytes):
        self._text = bytes(text)
        self._n = len(self._text)
        self._index: List[int] = list(range(self._n))
        self._sort()

    def length(self) -> int:
        """Number of bytes (and rotations) in the buffer"""
        return self._n

    def __len__(self) -> int:
        return self._n

    def rank_to_offset(self, i: int) -> int:
        """
        Offset of the rotation with sorted rank i

        Raises:
            IndexError: if i is outside [0, N)
        """
        if i < 0 or i >= self._n:
            raise IndexError(f"Rank {i} out of range for length {self._n}")
        return self._index[i]

    def offsets(self) -> List[int]:
        """Copy of the whole permutation, ordered by rank"""
        return list(self._index)

    def _sort(self) -> None:
        text = self._text
        index = self._index
        n = self._n

        stack = [(0, n - 1, 0)]
        while stack:
            lo, hi, d = stack.pop()
            if hi <= lo + CUTOFF:
                self._insertion(lo, hi, d)
                continue

            lt, gt = lo, hi
            pivot = text[(index[lo] + d) % n]
            i = lo + 1
            while i <= gt:
                t = text[(index[i] + d) % n]
                if t < pivot:
                    index[lt], index[i] = index[i], index[lt]
                    lt += 1
                    i += 1
                elif t > pivot:
                    index[i], index[gt] = index[gt], index[i]
                    gt -= 1
                else:
                    i += 1

            # index[lo..lt-1] < pivot = index[lt..gt] < index[gt+1..hi]
            stack.append((lo, lt - 1, d))
            if d < n:
                stack.append((lt, gt, d + 1))
            stack.append((gt + 1, hi, d))

    def _insertion(self, lo: int, hi: int, d: int) -> None:
        index = self._index
        for i in range(lo, hi + 1):
            j = i
            while j > lo and self._less(index[j], index[j - 1], d):
                index[j], index[j - 1] = index[j - 1], index[j]
                j -= 1

    def _less(self, i: int, j: int, d: int) -> bool:
        """Is rotation i smaller than rotation j, comparing from depth d?"""
        if i == j:
            return False
        text = self._text
        n = self._n
        k = i + d
        m = j + d
        for _ in range(n):
            a = text[k % n]
            b = text[m % n]
            if a != b:
                return a < b
            k += 1
            m += 1
        # Identical over a full period
        return (k % n) > (m % n)
