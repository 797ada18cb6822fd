from django.core.mail import EmailMultiAlternatives
from django.core.mail.message import make_msgid
from django.template.loader import render_to_string
from django.utils.html import strip_tags
from django.conf import settings


def send_receipt_email(
    to,
    receipt_number,
    attachment,
    customer_name="Valued Customer",
    order_date="",
    delivery_date="To be confirmed",
    total_amount="0.00",
    admin_emails=None,
):
    """
    Send the order confirmation with the PDF receipt attached.

    ``attachment`` is the raw PDF content. Extra admin recipients and the
    configured ``ADMIN_EMAILS`` are copied in. SMTP errors propagate to the caller.
    """
    subject = f'Your {settings.STORE_NAME} Order Confirmation'
    html_content = render_to_string('orders/receipt_email.html', {
        "store_name": settings.STORE_NAME,
        "customer_name": customer_name,
        "receipt_number": receipt_number,
        "order_date": order_date,
        "delivery_date": delivery_date,
        "total_amount": total_amount,
    })
    text_content = strip_tags(html_content)
    from_email = f'"{settings.STORE_NAME}" <{settings.DEFAULT_FROM_EMAIL}>'

    cc = []
    for email in list(admin_emails or []) + list(settings.ADMIN_EMAILS):
        if email and email not in cc and email != to:
            cc.append(email)

    message_id = make_msgid()
    msg = EmailMultiAlternatives(subject, text_content, from_email, [to], cc=cc)
    msg.attach_alternative(html_content, "text/html")
    msg.attach(f"receipt-{receipt_number}.pdf", attachment, "application/pdf")

    msg.extra_headers = {
        "X-Mailer": "Django",
        "Reply-To": settings.DEFAULT_FROM_EMAIL,
        "Message-ID": message_id,
    }

    msg.send()
    return {"success": True, "messageId": message_id}
