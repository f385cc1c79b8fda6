# Import kernels
from .cpu_numpy import *

# Torch kernels are optional (will be skipped if torch is not installed)
try:
    from .cpu_torch import *
except ImportError:
    pass
except Exception as e:
    print(f"Warning: Could not load torch kernels: {e}")
