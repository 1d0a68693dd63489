"""Console bus stop browser and the sequences, lists, stacks, queues, networks and sorts it uses."""

__version__ = "0.1.0"