"""
Email templates
"""
from html import escape
from app.core.config import settings

OTP_EMAIL_SUBJECT = "Verify Your BarterBrAIn Account"


def render_otp_email(code: str, university_name: str) -> tuple[str, str]:
    """
    Render the verification code email

    Returns: (html, text)
    """
    minutes = max(1, settings.OTP_EXPIRY // 60)
    university = escape(university_name or "your campus")

    html = f"""<!DOCTYPE html>
<html>
<head>
  <meta charset="utf-8">
  <style>
    body {{ font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', sans-serif; line-height: 1.6; color: #000; }}
    .container {{ max-width: 600px; margin: 0 auto; padding: 20px; }}
    .header {{ text-align: center; padding: 40px 0; }}
    .title {{ font-size: 28px; font-weight: bold; color: #0ABAB5; margin: 0; }}
    .otp-box {{ background: #F2F2F7; border-radius: 12px; padding: 30px; text-align: center; margin: 30px 0; }}
    .otp-code {{ font-size: 36px; font-weight: bold; letter-spacing: 8px; color: #0ABAB5; margin: 20px 0; }}
    .info {{ color: #8E8E93; font-size: 14px; text-align: center; margin-top: 30px; }}
    .footer {{ text-align: center; margin-top: 40px; padding-top: 20px; border-top: 1px solid #E5E5EA; color: #8E8E93; font-size: 12px; }}
  </style>
</head>
<body>
  <div class="container">
    <div class="header">
      <h1 class="title">BarterBrAIn</h1>
    </div>
    <p>Hello,</p>
    <p>You're one step away from joining <strong>{university}</strong> on BarterBrAIn!</p>
    <div class="otp-box">
      <p style="margin: 0; color: #8E8E93;">Your verification code is:</p>
      <div class="otp-code">{code}</div>
      <p style="margin: 0; color: #8E8E93; font-size: 14px;">This code expires in {minutes} minutes</p>
    </div>
    <p>If you didn't request this code, please ignore this email.</p>
    <p class="info">
      BarterBrAIn is a campus-exclusive marketplace for verified students to trade items sustainably.
    </p>
    <div class="footer">
      <p>BarterBrAIn. Campus Exchange, Elevated.</p>
    </div>
  </div>
</body>
</html>
"""

    text = (
        f"Your BarterBrAIn verification code is: {code}\n\n"
        f"This code expires in {minutes} minutes.\n\n"
        "If you didn't request this code, please ignore this email.\n\n"
        "- BarterBrAIn Team\n"
    )

    return html, text
