class Temperature:
    value = 1
    unit = "C"

    def compare(self, value):
        return self.value == value

    def label(self):
        unit = "F"
        return f"{self.value}{self.unit}" + unit
