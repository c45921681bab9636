"""Version information for hookscan."""

# Semantic versioning: MAJOR.MINOR.PATCH
# MAJOR: Breaking changes to the JSON result shape
# MINOR: New patterns or report sections, backward compatible
# PATCH: Bug fixes, backward compatible

__version__ = "0.2.1"
__version_info__ = tuple(int(x) for x in __version__.split("."))

# Version history:
# 0.2.1 - Configurable pattern table and exclusion directories
#         - extra_patterns / exclude_dirs read from hookscan.yaml
#         - Per-file parse failures no longer abort a scan
# 0.2.0 - redux hooks (useSelector, useDispatch, useStore)
#         - Top components table and verbose per-line listing
# 0.1.0 - Initial release
#         - useState / useContext / useReducer / zustand / jotai detection
#         - JSON export of the analysis result
