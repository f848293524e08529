"""Business constants for the workshop appointment book."""

# Calendar slots (24-hour format)
FIRST_SLOT = "09:00"
LAST_SLOT = "20:00"

# Appointment slot interval (in minutes)
SLOT_INTERVAL_MINUTES = 30

# Time used when a booking does not name one
DEFAULT_BOOKING_TIME = "09:00"

# Appointment statuses (None means unset)
APPOINTMENT_STATUS_ARRIVED = "arrived"
APPOINTMENT_STATUS_MISSED = "missed"
APPOINTMENT_STATUSES = [
    APPOINTMENT_STATUS_ARRIVED,
    APPOINTMENT_STATUS_MISSED
]

# Client reliability verdicts
RELIABILITY_RELIABLE = "reliable"
RELIABILITY_UNRELIABLE = "unreliable"
RELIABILITY_NEUTRAL = "neutral"

# Fallback color in the identity key of clients without a plate number.
# Existing reliability history is keyed on this exact value.
NO_COLOR_LABEL = "Без цвета"

# Backup file format
BACKUP_VERSION = 1
BACKUP_FILENAME_PREFIX = "autoservice-backup-"

# Calendar labels (Monday first)
DAY_LABELS = ["Пн", "Вт", "Ср", "Чт", "Пт", "Сб", "Вс"]

DAY_NAMES = [
    "Понедельник",
    "Вторник",
    "Среда",
    "Четверг",
    "Пятница",
    "Суббота",
    "Воскресенье"
]

MONTH_NAMES_GENITIVE = [
    "января", "февраля", "марта", "апреля", "мая", "июня",
    "июля", "августа", "сентября", "октября", "ноября", "декабря"
]

# Car catalog the workshop starts with
DEFAULT_CAR_CATALOG = {
    "Toyota": ["Camry", "Corolla", "RAV4", "Land Cruiser"],
    "BMW": ["X5", "3 Series", "5 Series", "X3"],
    "Mercedes-Benz": ["E-Class", "C-Class", "GLE", "S-Class"],
    "Audi": ["A4", "A6", "Q5", "Q7"],
    "Volkswagen": ["Polo", "Passat", "Tiguan", "Golf"]
}
