"""
Trading use cases.

Each module holds one use case class with an ``execute`` method. Store
adapters and the clock are passed to the constructor.
"""
