"""Dashboard forms: admin login and admin password management."""
from django import forms

from apps.bookings.models import BookingStatus


_ctrl = {'class': 'form-control'}


class LoginForm(forms.Form):
    password = forms.CharField(
        label='Admin Password',
        strip=False,
        widget=forms.PasswordInput(attrs={**_ctrl, 'placeholder': 'Enter admin password'}),
    )


class PasswordForm(forms.Form):
    # Emptiness and duplicates are checked by the gate, not here.
    password = forms.CharField(
        label='New Password',
        required=False,
        strip=False,
        widget=forms.TextInput(attrs={**_ctrl, 'placeholder': 'Enter new password'}),
    )


class StatusUpdateForm(forms.Form):
    """Approve / Reject buttons. Pending is never offered."""
    status = forms.ChoiceField(choices=[
        (BookingStatus.APPROVED, 'Approve'),
        (BookingStatus.REJECTED, 'Reject'),
    ])
