"""Built-in broker catalog served when no catalog file is configured."""

from __future__ import annotations

from .models import BrokerCatalog, BrokerProfile, OptOutMethod

_DEFAULT_BROKERS: tuple[BrokerProfile, ...] = (
    BrokerProfile(
        broker_id="whitepages",
        name="Whitepages",
        description="Online directory providing contact information and background data",
        website="https://www.whitepages.com",
        opt_out_url="https://www.whitepages.com/suppression-requests",
        category="People Search",
        data_types=("name", "address", "phone", "age", "relatives"),
        opt_out_method=OptOutMethod(
            method_type="online_form",
            instructions="Fill out the opt-out form on their suppression page",
            steps=(
                "Visit the opt-out page",
                "Search for your listing",
                'Click "Remove this listing"',
                "Enter your email for confirmation",
                "Verify via email link",
            ),
        ),
        required_fields=("firstName", "lastName", "state"),
        estimated_response_days=7,
    ),
    BrokerProfile(
        broker_id="spokeo",
        name="Spokeo",
        description="People search engine aggregating public records and social media",
        website="https://www.spokeo.com",
        opt_out_url="https://www.spokeo.com/optout",
        category="People Search",
        data_types=("name", "address", "phone", "email", "social_media", "photos"),
        opt_out_method=OptOutMethod(
            method_type="online_form",
            instructions="Submit opt-out request through their form",
            steps=(
                "Go to opt-out page",
                "Search for your profile",
                "Select listings to remove",
                "Enter email address",
                "Confirm via email",
            ),
        ),
        required_fields=("firstName", "lastName", "state", "email"),
        estimated_response_days=5,
    ),
    BrokerProfile(
        broker_id="beenverified",
        name="BeenVerified",
        description="Background check and people search service",
        website="https://www.beenverified.com",
        opt_out_url="https://www.beenverified.com/app/optout/search",
        category="Background Check",
        data_types=("name", "address", "phone", "criminal_records", "property_records"),
        opt_out_method=OptOutMethod(
            method_type="online_form",
            instructions="Use their opt-out search tool",
            steps=(
                "Visit opt-out page",
                "Enter your information",
                "Find your record",
                "Request removal",
                "Verify email",
            ),
        ),
        required_fields=("firstName", "lastName", "city", "state", "email"),
        estimated_response_days=14,
    ),
    BrokerProfile(
        broker_id="truthfinder",
        name="TruthFinder",
        description="Public records search and background check service",
        website="https://www.truthfinder.com",
        opt_out_url="https://www.truthfinder.com/opt-out/",
        category="Background Check",
        data_types=("name", "address", "phone", "criminal_records", "social_media"),
        opt_out_method=OptOutMethod(
            method_type="email",
            instructions="Email their opt-out team with required information",
            steps=(
                "Find your profile URL",
                "Send email to opt-out address",
                "Include profile URL and personal info",
                "Wait for confirmation",
            ),
            template_id="truthfinder-optout",
        ),
        required_fields=("firstName", "lastName", "address", "email"),
        estimated_response_days=30,
        contact_email="optout@truthfinder.com",
    ),
    BrokerProfile(
        broker_id="intelius",
        name="Intelius",
        description="People search and background check provider",
        website="https://www.intelius.com",
        opt_out_url="https://www.intelius.com/opt-out/",
        category="People Search",
        data_types=("name", "address", "phone", "relatives", "property_records"),
        opt_out_method=OptOutMethod(
            method_type="online_form",
            instructions="Complete the opt-out form",
            steps=(
                "Go to opt-out page",
                "Search for your record",
                "Verify your identity",
                "Submit opt-out request",
                "Receive confirmation",
            ),
        ),
        required_fields=("firstName", "lastName", "age", "state", "email"),
        estimated_response_days=10,
    ),
)

_DEFAULT_CATEGORIES: tuple[str, ...] = (
    "People Search",
    "Data Broker",
    "Background Check",
    "Public Records",
    "Social Media",
    "Marketing",
)

_TEMPLATE_DEFAULT_GDPR = """Subject: GDPR Data Deletion Request

Dear [Broker Name],

I am writing to request the immediate deletion of my personal data from your database under Article 17 of the General Data Protection Regulation (GDPR).

Personal Information to be Deleted:
- Full Name: [Full Name]
- Email Address: [Email Address]
- Phone Number: [Phone Number]
- Current Address: [Street Address], [City], [State] [Zip Code]
- Previous Addresses: [Previous Addresses if applicable]

Please confirm:
1. Receipt of this request
2. When my data will be deleted
3. That my data will not be shared with third parties
4. That my data will be removed from all databases and backups

I expect this request to be completed within 30 days as required by GDPR.

Thank you,
[Full Name]
[Date]"""

_TEMPLATE_DEFAULT_CCPA = """Subject: CCPA Data Deletion Request

Dear [Broker Name],

Pursuant to the California Consumer Privacy Act (CCPA), I am requesting that you delete all of my personal information that you have collected and stored.

Personal Information to be Deleted:
- Full Name: [Full Name]
- Email Address: [Email Address]
- Phone Number: [Phone Number]
- Address: [Street Address], [City], [State] [Zip Code]

Under CCPA Section 1798.105, I have the right to request deletion of my personal information. Please confirm:
1. Receipt of this deletion request
2. Timeline for completion
3. That my data will not be sold or shared

I request that you respond to this request within 45 days as required by law.

Sincerely,
[Full Name]
[Date]"""

_TEMPLATE_TRUTHFINDER_OPTOUT = """Subject: Opt-Out Request

Dear TruthFinder Opt-Out Team,

I am requesting that my personal information be removed from TruthFinder.com.

My Information:
- Full Name: [Full Name]
- Current Address: [Street Address], [City], [State] [Zip Code]
- Email: [Email Address]
- Profile URL: [Profile URL found on TruthFinder]

Please remove all records associated with my name and address, and confirm when this has been completed.

Thank you,
[Full Name]"""

_TEMPLATE_EMAIL_GENERIC = """Subject: Request to Remove Personal Information

Dear [Broker Name],

I am writing to request the removal of my personal information from your database.

Personal Information:
- Name: [Full Name]
- Email: [Email Address]
- Phone: [Phone Number]
- Address: [Street Address], [City], [State] [Zip Code]

Under applicable privacy laws (GDPR, CCPA, etc.), I request that you:
1. Delete all my personal information from your records
2. Do not sell or share my information
3. Confirm completion of this request
4. Provide a reference number for this request

Please process this request within 30 days and send confirmation to [Email Address].

Regards,
[Full Name]
[Date]"""

_TEMPLATE_PHONE_SCRIPT = """Hello, I'm calling to request removal of my personal information from your database.

My name is [Full Name], and I'd like to opt out of your services.

The information I'd like removed includes:
- My name: [Full Name]
- My address: [Address]
- My phone number: [Phone Number]
- My email: [Email Address]

Can you please confirm:
1. You've received my opt-out request
2. How long it will take to process
3. A reference number for my request

Thank you for your assistance."""

_TEMPLATE_MAIL_LETTER = """[Your Name]
[Your Address]
[City, State ZIP]
[Email Address]
[Phone Number]

[Date]

[Broker Name]
[Broker Address]
[City, State ZIP]

Re: Request to Remove Personal Information

Dear Sir or Madam,

I am writing to formally request the removal of all my personal information from your database and any affiliated services.

Personal Information to be Removed:
- Full Name: [Full Name]
- Date of Birth: [DOB if required]
- Current Address: [Street Address], [City], [State] [Zip Code]
- Previous Addresses: [List if applicable]
- Email Address: [Email Address]
- Phone Number: [Phone Number]

Under the Fair Credit Reporting Act and applicable state privacy laws, I request that you:

1. Delete all personal information associated with my name and addresses
2. Cease any further collection of my information
3. Do not sell or share my information with third parties
4. Provide written confirmation of deletion to the address above

Please confirm receipt of this request and provide a timeline for completion.

Sincerely,

[Signature]
[Printed Name]"""


def catalog_build_default() -> BrokerCatalog:
    """Return the built-in broker catalog.

    Returns:
        BrokerCatalog: Default catalog with brokers, categories and templates.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    return BrokerCatalog(
        brokers=_DEFAULT_BROKERS,
        categories=_DEFAULT_CATEGORIES,
        templates={
            "default-gdpr": _TEMPLATE_DEFAULT_GDPR,
            "default-ccpa": _TEMPLATE_DEFAULT_CCPA,
            "truthfinder-optout": _TEMPLATE_TRUTHFINDER_OPTOUT,
            "email-generic": _TEMPLATE_EMAIL_GENERIC,
            "phone-script": _TEMPLATE_PHONE_SCRIPT,
            "mail-letter": _TEMPLATE_MAIL_LETTER,
        },
    )
