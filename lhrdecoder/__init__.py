from .parser.constants import ROOT, Governor
from .parser.errors import DecodingError, EmptyInputError, \
    NoCandidateError, UnresolvableCycleError
from .parser.arc_scores import ArcScores
from .parser.dependency_graph import DependencyGraph
from .parser.cycles import CycleFixer
from .parser.decoding import assign_heads, fix_cycles, decode_tree, \
    batch_decode, DecodingInput, DecodingOutcome
from .parser.labeling import RelationLabeler, LabelPredictor, LabelSelector
from .parser.alphabet import Alphabet
from .parser.scoring import cosine_arc_scores
from .parser.dependency_instance import DependencyInstance
from .parser.dependency_reader import read_instances
from .parser.dependency_writer import DependencyWriter
