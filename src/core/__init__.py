"""
Core numeric primitives and typed value models.

Fixed-width integer wraparound, binary32/binary64 float semantics and the
tagged-value / method-descriptor models built on top of them.
"""
