class FirstCandidatesSampler:
    """Детерминированная выборка: первые k кандидатов (кандидаты приходят отсортированными по id)"""

    def __init__(self):
        self.calls = []

    def sample(self, population, k):
        self.calls.append((list(population), k))
        return list(population)[:k]


class LastCandidatesSampler(FirstCandidatesSampler):
    def sample(self, population, k):
        self.calls.append((list(population), k))
        return list(population)[len(population) - k:] if k else []
