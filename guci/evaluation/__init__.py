from guci.evaluation.evaluator import evaluate, evaluate_list
from guci.evaluation.apply import apply
from guci.evaluation.actions import commit
from guci.evaluation.term_utils import as_identifier, has_unbound_variables
