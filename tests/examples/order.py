"""
Order: a pydantic model with an enum field.
"""

from enum import Enum

from pydantic import BaseModel

from data_factory import Factory, HasDataFactory


class OrderStatus(Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


class Order(HasDataFactory, BaseModel):
    id: str
    status: OrderStatus
    total: float
    created_at: str

    @classmethod
    def new_factory(cls) -> "OrderFactory":
        return OrderFactory()


class OrderFactory(Factory):
    data_object = Order

    def definition(self):
        return {
            "id": self.fake.uuid4(),
            "status": self.fake.random_element(list(OrderStatus)),
            "total": round(float(self.rng.uniform(10, 1000)), 2),
            "created_at": self.fake.date_time().strftime("%Y-%m-%d %H:%M:%S"),
        }

    def pending(self) -> "OrderFactory":
        return self.state({"status": OrderStatus.PENDING})

    def processing(self) -> "OrderFactory":
        return self.state({"status": OrderStatus.PROCESSING})

    def shipped(self) -> "OrderFactory":
        return self.state({"status": OrderStatus.SHIPPED})

    def delivered(self) -> "OrderFactory":
        return self.state({"status": OrderStatus.DELIVERED})

    def cancelled(self) -> "OrderFactory":
        return self.state({"status": OrderStatus.CANCELLED})
