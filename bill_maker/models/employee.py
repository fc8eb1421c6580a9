# models/employee.py
import uuid


def new_id() -> str:
    return uuid.uuid4().hex


class Employee:
    def __init__(self, id, name, card_no, designation, default_taka=0):
        self.id = id
        self.name = name
        self.card_no = card_no            # directory key (trimmed)
        self.designation = designation    # LABOUR / S/O / JR. SUPPLY CHAIN EXECUTIVE / ...
        self.default_taka = default_taka  # last computed rate

    def __repr__(self):
        return f"Employee({self.card_no!r}, {self.name!r}, {self.designation!r})"

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'cardNo': self.card_no,
            'designation': self.designation,
            'defaultTaka': self.default_taka
        }

    @staticmethod
    def from_dict(data):
        return Employee(
            id=data.get('id') or new_id(),
            name=data.get('name') or '',
            card_no=str(data.get('cardNo') or ''),
            designation=data.get('designation') or '',
            default_taka=int(data.get('defaultTaka') or 0),
        )
