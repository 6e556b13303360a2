from django import forms

from apps.services.catalog import service_choices


class BookingForm(forms.Form):
    name = forms.CharField(
        max_length=120,
        label='Full Name',
        widget=forms.TextInput(attrs={
            'class': 'form-control',
            'placeholder': 'Your full name',
            'autocomplete': 'name',
        }),
    )
    email = forms.EmailField(
        label='Email Address',
        widget=forms.EmailInput(attrs={
            'class': 'form-control',
            'placeholder': 'you@example.com',
            'autocomplete': 'email',
        }),
    )
    phone = forms.CharField(
        max_length=30,
        label='Phone Number',
        widget=forms.TextInput(attrs={
            'class': 'form-control',
            'placeholder': 'e.g. 555-123-4567',
            'autocomplete': 'tel',
        }),
    )
    address = forms.CharField(
        max_length=300,
        label='Address',
        widget=forms.TextInput(attrs={
            'class': 'form-control',
            'placeholder': 'Street, city, ZIP',
            'autocomplete': 'street-address',
        }),
    )
    service = forms.ChoiceField(
        label='Service',
        choices=[('', '-- Please choose a service --')] + service_choices(),
        widget=forms.Select(attrs={'class': 'form-control'}),
    )
    date = forms.DateField(
        label='Preferred Date',
        input_formats=['%Y-%m-%d'],
        widget=forms.DateInput(attrs={'class': 'form-control', 'type': 'date'}, format='%Y-%m-%d'),
    )
    time = forms.TimeField(
        label='Preferred Time',
        input_formats=['%H:%M'],
        widget=forms.TimeInput(attrs={'class': 'form-control', 'type': 'time'}, format='%H:%M'),
    )

    def booking_fields(self) -> dict:
        """Cleaned data in the string shape the remote store expects."""
        data = self.cleaned_data
        return {
            'name':    data['name'].strip(),
            'email':   data['email'],
            'phone':   data['phone'].strip(),
            'address': data['address'].strip(),
            'service': data['service'],
            'date':    data['date'].strftime('%Y-%m-%d'),
            'time':    data['time'].strftime('%H:%M'),
        }


class StatusLookupForm(forms.Form):
    """Booking number lookup on the public status page."""
    booking_number = forms.CharField(
        max_length=40,
        label='Booking Number',
        widget=forms.TextInput(attrs={
            'class': 'form-control form-control-lg',
            'placeholder': 'Enter your booking number (e.g., SPK9A3B2)',
        }),
    )
