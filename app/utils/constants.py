"""
Enumerations and field limits for barangay records.
"""

# Allowed values for Resident.sex
SEX_CHOICES = ["Male", "Female", "Other"]

# Allowed values for HouseholdMember.relation_to_head
RELATION_CHOICES = [
    "Head",
    "Spouse",
    "Child",
    "Parent",
    "Sibling",
    "Grandchild",
    "Grandparent",
    "Other",
    "Self",
]

DEFAULT_ROLE = "Staff"
DEFAULT_RESIDENT_STATUS = "Resident"
DEFAULT_INCIDENT_STATUS = "Open"

# Official positions whose holders are referred to by title in the history log
TITLED_ROLE_KEYWORDS = ("Barangay", "Punong", "Chairman")
ADMIN_ROLE = "Admin"
ADMIN_DISPLAY_TITLE = "Chairman"

# Server-side length ceilings (characters)
MAX_LENGTHS = {
    "username": 50,
    "full_name": 100,
    "role": 50,
    "last_name": 100,
    "first_name": 100,
    "middle_name": 100,
    "suffix": 50,
    "nickname": 50,
    "civil_status": 50,
    "employment_status": 50,
    "registered_voter": 10,
    "resident_status": 50,
    "contact_no": 50,
    "address": 255,
    "household_name": 100,
    "purok": 100,
    "incident_type": 100,
    "location": 255,
    "complainant_name": 150,
    "status": 50,
    "service_name": 150,
    "certificate_type": 100,
    "purpose": 255,
    "place_issued": 150,
    "or_number": 50,
    "position": 100,
    "barangay_name": 100,
    "municipality": 100,
    "province": 100,
}

# Human-readable field labels used in validation messages
FIELD_LABELS = {
    "last_name": "Last name",
    "first_name": "First name",
    "middle_name": "Middle name",
    "contact_no": "Contact number",
    "household_name": "Household name",
    "full_name": "Full name",
}
