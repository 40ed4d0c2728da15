# ==============================================
# Persisted Model Store
# ==============================================
#
# Package Structure:
#
# modelstore/
# ├── metadata/         # Model descriptors and compiled models
# ├── serialization/    # EDMX reader / writer
# ├── persistence/      # ModelStore contract + file / memory backends
# ├── type_identity.py  # Consumer type -> cache key
# ├── errors.py         # Exception hierarchy
# ├── model_cache.py    # Load-or-build orchestrator
# ├── config.py         # Configuration management
# └── cli.py            # Command line entry point
#
# ==============================================

__version__ = "0.1.0"
