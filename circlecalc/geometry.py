from dataclasses import dataclass

PI = 3.14159
CM_PER_INCH = 2.54


def cm_to_inches(length):
    return length / CM_PER_INCH


def area(radius):
    """Area of a circle, in the square of the radius' unit."""
    return PI * radius * radius


def circumference(radius):
    return 2 * PI * radius


@dataclass(frozen=True)
class Measurement:
    """A circle whose radius was given in centimeters.

    Areas and lengths are reported in inches.
    """

    radius: float

    @property
    def inches(self):
        return cm_to_inches(self.radius)

    @property
    def area(self):
        return area(self.inches)

    @property
    def circumference(self):
        return circumference(self.inches)
