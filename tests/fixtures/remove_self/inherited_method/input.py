class B(A):
    def say(self):
        return self.greeting()
