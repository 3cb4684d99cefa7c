"""menagerie package entry point"""

__all__ = ["Animal", "Pig", "Dog", "VARIANTS", "create", "Scenario", "Step", "CANONICAL"]

try:
	# Prefer absolute imports when package is installed or run as a module
	from menagerie.entity import Animal, Pig, Dog, VARIANTS, create
	from menagerie.scenario import Scenario, Step, CANONICAL
except ImportError:
	# Fallback to relative imports (useful when running files directly)
	from .entity import Animal, Pig, Dog, VARIANTS, create
	from .scenario import Scenario, Step, CANONICAL

__version__ = "0.1.0"
