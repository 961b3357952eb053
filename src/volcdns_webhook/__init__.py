"""cert-manager DNS-01 webhook solver for Volcengine Public DNS."""

from volcdns_webhook.solver import VolcDnsSolver

__all__ = ["VolcDnsSolver"]
__version__ = "0.1.0"
