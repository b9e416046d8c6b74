"""Read and write the BERT, BERR and CPER containers that carry Crash Log records."""

__version__ = "0.1.0"