# hingad/utils/constants.py

class Roles:
    """
    Defines the role names carried on user accounts and in bearer tokens.
    Keeping them here avoids typos in the role checks spread across routes.
    """
    ADMIN = 'ADMIN'
    USER = 'USER'


# The five daily boundaries, in the order they occur within a day.
PRAYER_NAMES = ('Fajr', 'Dhuhr', 'Asr', 'Maghrib', 'Isha')
