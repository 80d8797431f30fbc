"""
Vehicle: the smallest example, with an object and a dict-record factory.
"""

from dataclasses import dataclass

from data_factory import ArrayFactory, Factory, HasDataFactory


@dataclass
class Vehicle(HasDataFactory):
    make: str
    model: str

    @classmethod
    def new_factory(cls) -> "VehicleFactory":
        return VehicleFactory()


class VehicleFactory(Factory):
    data_object = Vehicle

    def definition(self):
        return {
            "make": self.fake.company(),
            "model": self.fake.word(),
        }

    def mercedes(self) -> "VehicleFactory":
        return self.state(lambda attributes: {"make": "Mercedes"})

    def with_model(self, model: str) -> "VehicleFactory":
        return self.state({"model": model})


class VehicleArrayFactory(ArrayFactory):
    def definition(self):
        return {
            "make": self.fake.company(),
            "model": self.fake.word(),
        }
