from .zip_longest import ZipLongest
from .zip_stream import iter_zip_with_gaps

__all__ = ["ZipLongest", "iter_zip_with_gaps"]
