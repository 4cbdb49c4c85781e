"""Single Responsibility Principle: one class, two reasons to change."""


class UserService:
    def get_user(self, user_id):
        return {"id": user_id, "name": f"user-{user_id}", "email": f"user-{user_id}@example.com"}

    def send_email(self, user, message):
        return f"Sending '{message}' to {user['email']}"
