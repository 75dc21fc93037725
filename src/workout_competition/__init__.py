"""workout-competition: log workouts and compete on percentage improvement."""

__version__ = "0.1.0"
