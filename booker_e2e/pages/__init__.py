from booker_e2e.pages.login_page import LoginPage

__all__ = ["LoginPage"]
