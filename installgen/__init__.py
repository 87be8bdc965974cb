"""installgen - Windows cell install script generator for BOSH-deployed clusters"""

__version__ = "1.0.0"
