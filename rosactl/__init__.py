"""rosactl - administration CLI for managed OpenShift clusters."""

__version__ = "0.1.0"
