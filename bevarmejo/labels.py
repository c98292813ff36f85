"""Labels used in configuration and output files, plus small string helpers."""

# Output main file: filename prefix and suffix.
BEME_PREFIX = "bemeopt__"
BEME_SUFFIX = "__exp.json"

# Parameters and flags at the experiment or archipelago level.
ARCHI = "Archipelago"
TOPOLOGY = "Topology"
NAME = "Name"
PARAMS = "Parameters"
EXTRA_INFO = "Extra info"
ISLANDS = "Islands"
ERRORS = "Errors"
SYSTEM = "System"
SOFTWARE = "Software"
BEME_VERSION = "Bemelib version"

# Static parameters of an island.
ALGORITHM = "Algorithm"
ISLAND = "Island"
PROBLEM = "Problem"
R_POLICY = "Replacement policy"
S_POLICY = "Selection policy"

# Dynamic parameters of an island.
GENERATIONS = "Generations"
CURRTIME = "Current time"
POP_SEED = "Population seed"
FEVALS = "Fitness evaluations"
GEVALS = "Gradient evaluations"
HEVALS = "Hessian evaluations"
INDIVIDUALS = "Individuals"
ID = "ID"
DV = "Decision vector"
FV = "Fitness vector"

# Input file keys.
EXP_NAME = "Experiment name"
EXP_NAME_SH = "Exp name"
PATHS = "Lookup paths"
PATHS_SH = "Paths"
TOPOLOGY_SH = "UDT"
PARAMS_SH = "Params"

# Typical island configuration.
TYPCONFIG = "Typical configuration"
ISL_NAME = "Island name"
ISL_NAME_SH = "Isl name"
ISLAND_SH = "UDI"
ALGORITHM_SH = "UDA"
PROBLEM_SH = "UDP"
R_POLICY_SH = "UDRP"
S_POLICY_SH = "UDSP"
POPULATION = "Population"
SIZE = "Size"
SEED = "Seed"
REPORT_GEN = "Report generation"
REPORT_GEN_SH = "Report gen"

# Specializations.
SPECS = "Specializations"
RAND_STARTS = "Random starts"

# Namespace and file-name pieces.
BEME_NAMESPACE = "bevarmejo::"
BEME_FILENAMES_SEPARATOR = "__"
BEMEEXP_PREFIX = "bemeexp"
BEMEEXP_EXP_SUFFIX = ".exp"
BEMEEXP_ISL_SUFFIX = ".isl"
BEMEEXP_LOG_SUFFIX = ".log"
BEMEEXP_OUT_FOLDER = "output"
OPTIM_FILE_PREFIX = "bemeopt"
SIM_FILE_PREFIX = "bemesim"


def to_kebab_case(text: str) -> str:
    """Lower-case ``text`` and separate words and capital runs with hyphens."""
    pieces: list[str] = []
    prev_is_upper = False
    for char in text:
        if char.isascii() and char.isupper():
            if not prev_is_upper:
                pieces.append("-")
            pieces.append(char.lower())
            prev_is_upper = True
        else:
            pieces.append(char)
            prev_is_upper = False
    result = "".join(pieces).replace(" ", "-")
    if result.startswith("-"):
        result = result[1:]
    return result


def split(text: str, delimiter: str) -> list[str]:
    """Split ``text`` on ``delimiter``; a trailing delimiter yields no empty token."""
    if not text:
        return []
    tokens = text.split(delimiter)
    if tokens[-1] == "":
        tokens.pop()
    return tokens