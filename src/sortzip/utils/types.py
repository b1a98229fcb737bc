GenomicInterval = tuple[str, int, int]
"""(chrom, start, end), half-open"""
