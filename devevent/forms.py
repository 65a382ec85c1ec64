"""
WTForms for DevEvent pages.
"""
from flask_wtf import FlaskForm
from wtforms import EmailField, SubmitField
from wtforms.validators import DataRequired, Length, Regexp

from devevent.models.booking import EMAIL_PATTERN


class BookingForm(FlaskForm):
    email = EmailField(
        'Email Address',
        filters=[lambda value: value.strip() if value else value],
        validators=[
            DataRequired(message='Email is required'),
            Length(max=254),
            Regexp(EMAIL_PATTERN, message='Please enter a valid email address'),
        ]
    )
    submit = SubmitField('Submit')
