'''Compensated summation for long-running accumulations.'''


class DoublePrecision:
    """
    Running sum that carries its own rounding error.

    Adding a small increment to a large accumulated value loses the low-order
    bits of the increment. ``error`` holds what was lost and is fed back into
    the next increment (Kahan summation), so a sum of many equal steps stays
    within a couple of ulps of the exact value.
    """

    def __init__(self, value: float = 0.0, error: float = 0.0):
        self.value = float(value)
        self.error = float(error)

    def increment(self, right: float) -> "DoublePrecision":
        temp = self.value
        y = self.error + right
        self.value = temp + y
        self.error = (temp - self.value) + y
        return self

    def __float__(self):
        return self.value

    def __repr__(self):
        return f"DoublePrecision(value={self.value!r}, error={self.error!r})"
