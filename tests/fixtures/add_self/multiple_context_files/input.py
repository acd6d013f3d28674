class Square(Shape):
    side = 2

    def describe(self):
        return f"{color} square of area {area()}"

    def area(self):
        return side * side
