REQUIRED_FIELDS = ('name', 'email')


class User:
    """A single user record.

    ``id`` stays ``None`` until the record is stored; the store assigns it.
    """
    def __init__(self, id, name, email):
        self.id = id
        self.name = name
        self.email = email

    def to_dict(self):
        return {'id': self.id, 'name': self.name, 'email': self.email}

    def __eq__(self, other):
        if not isinstance(other, User):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    __hash__ = None

    def __repr__(self):
        return f"<User id={self.id} name={self.name!r} email={self.email!r}>"


class UserForm:
    """Result of validating a submitted user form."""
    def __init__(self, user, errors):
        self.user = user
        self.errors = errors

    @property
    def is_valid(self):
        return not self.errors


def validate_user_form(form):
    """Turn submitted form fields into a candidate User plus field errors.

    A field counts as missing when it is absent or blank. Values are kept
    exactly as submitted.
    """
    values = {}
    errors = {}
    for field in REQUIRED_FIELDS:
        value = form.get(field)
        if value is None or not str(value).strip():
            errors[field] = f"{field.capitalize()} is required"
        values[field] = value if value is not None else ''
    return UserForm(User(None, values['name'], values['email']), errors)
