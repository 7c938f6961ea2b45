"""Video transcript retrieval and content-safety checking for parental review"""

__version__ = "0.1.0"
