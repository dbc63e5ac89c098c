from .tsp import TSPInstance, euclidean
from .moves import draw_segment, reverse_segment, reversal_delta
from .sa_base import SAConfig, SAResult, SimulatedAnnealing
from .tsplib import parse_tsp_file, read_solutions, list_tsp_files, instance_key
from .report import format_report, lookup_reference
from .experiments import run_parameter_sweep, run_repeated_trials
