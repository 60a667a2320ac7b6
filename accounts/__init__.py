"""
Accounts app

Portfolio users, bearer-token sign-in, and the admin write permission.
"""
