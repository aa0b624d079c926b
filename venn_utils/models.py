class User(object):
    def __init__(self, user_info):
        self.id = user_info.get('id')
        self.name = user_info.get('name')

    def __repr__(self):
        return '@' + (self.name or str(self.id))
