"""
Mixins that attach a companion factory to a data class.
"""


class HasDataFactory:
    """
    Makes a data class's factory discoverable as ``Model.factory()``.

    The data class implements ``new_factory()``; importing the factory there
    avoids a circular import between the model and factory modules.
    """

    @classmethod
    def factory(cls):
        return cls.new_factory()

    @classmethod
    def new_factory(cls):
        """Return a fresh companion factory. Data classes must override this."""
        raise NotImplementedError(f"{cls.__name__} must implement new_factory()")
