"""Switch between kubeconfig contexts and namespaces, remembering the last one."""

__version__ = "0.1.0"
