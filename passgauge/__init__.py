"""PassGauge: password strength and standards compliance."""

from .evaluator import PasswordAnalysis, analyze_password
from .generator import generate_passphrase, generate_random_password

__version__ = "0.1.0"
