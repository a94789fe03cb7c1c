from .utils import timestamp


class Votable:
    def __init__(self, data: dict):
        self.ups = data["ups"]
        self.downs = data["downs"]
        self.likes = data["likes"]
        self.score = data["score"]


class Created:
    def __init__(self, data: dict):
        self.created = timestamp(data["created_utc"])
