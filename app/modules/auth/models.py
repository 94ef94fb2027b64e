# Authentication uses the users table (see app/modules/users/models.py)
# Passwords are stored as argon2 hashes in users.password_hash
# Access tokens are stateless HS256 JWTs carrying sub, email, role, iat, exp
