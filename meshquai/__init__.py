"""
mesh-quai: Rosetta middleware for Quai

Core imports are lazily loaded. For direct module access, import from
submodules:

    from meshquai.configuration import load_configuration
    from meshquai.quai import checksum_address
    from meshquai.exceptions import ConfigurationError
"""

# Lazy imports so that importing the package stays cheap
def __getattr__(name):
    """Lazy module loading."""
    if name == 'load_configuration':
        from .configuration import load_configuration
        return load_configuration
    elif name == 'Configuration':
        from .configuration import Configuration
        return Configuration
    elif name == 'ConfigurationError':
        from .exceptions import ConfigurationError
        return ConfigurationError
    raise AttributeError(f"module 'meshquai' has no attribute {name!r}")

__all__ = ['load_configuration', 'Configuration', 'ConfigurationError']
