# Business logic not directly tied to API request/response:
# - account registration, login and logout (accounts.py)
# - password hashing (passwords.py)
# - the error taxonomy handlers report to clients (errors.py)
