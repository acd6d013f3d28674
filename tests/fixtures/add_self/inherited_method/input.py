class B(A):
    def say(self):
        return greeting()
