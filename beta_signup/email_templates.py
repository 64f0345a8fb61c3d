"""
MJML Email Templates
Welcome email sent to beta signups, in every supported language.
Compiled to responsive HTML by email_service before sending.
"""

# GoalHero theme colors - pitch green on light slate
THEME = {
    "primary": "#00C851",
    "primary_dark": "#007E33",
    "link": "#4CAF50",
    "background": "#f8fafc",
    "card_bg": "#ffffff",
    "panel_bg": "#f4f4f4",
    "text_primary": "#1a1a1a",
    "text_secondary": "#4a4a4a",
    "text_muted": "#6b7280",
    "border": "#e5e7eb",
    "instagram": "#E1306C",
}

FONT_STACK = "-apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, Oxygen, Ubuntu, Cantarell, sans-serif"

LOGO_URL = "https://www.goalhero.eu/assets/icon.png"
WEBSITE_URL = "https://www.goalhero.eu"
INSTAGRAM_URL = "https://instagram.com/goalhero.app"
SUPPORT_EMAIL = "info@goalhero.eu"

WELCOME_SUBJECTS = {
    "en": "🎉⚽ Welcome to GoalHero!",
    "es": "🎉⚽ ¡Bienvenido a GoalHero!",
}

# Copy is embedded in MJML markup, so entities must stay escaped
WELCOME_COPY = {
    "en": {
        "title": "Welcome to GoalHero!",
        "tagline": "Never cancel another match - find goalkeepers instantly",
        "welcome_heading": "⚽ Welcome to the Beta!",
        "welcome_body": (
            "Thank you for joining GoalHero! You're among the first to experience our "
            "revolutionary goalkeeper marketplace that ensures your team never forfeits "
            "another match due to missing keepers."
        ),
        "beta_notice": "📱 We'll contact you as soon as the beta is ready for download!",
        "features_heading": "What's Coming Your Way",
        "features": [
            "Post games and receive competitive bids from goalkeepers",
            "Browse verified goalkeeper profiles with ratings &amp; reviews",
            "Secure payment system with guaranteed show-up protection",
        ],
        "social_heading": "Stay Connected",
        "website_label": "🌐 Website",
        "instagram_label": "📷 Instagram",
        "support": "Have questions? We're here to help! Reply to this email or contact us at",
        "team": "GoalHero Team",
        "motto": "Making dreams achievable, one goal at a time.",
        "copyright": "© 2025 GoalHero. All rights reserved.",
        "unsubscribe": "Unsubscribe",
        "privacy": "Privacy Policy",
    },
    "es": {
        "title": "¡Bienvenido a GoalHero!",
        "tagline": "Nunca canceles otro partido - encuentra porteros al instante",
        "welcome_heading": "⚽ ¡Bienvenido a la Beta!",
        "welcome_body": (
            "¡Gracias por unirte a GoalHero! Estás entre los primeros en experimentar "
            "nuestro revolucionario marketplace de porteros que asegura que tu equipo nunca "
            "más tenga que abandonar un partido por falta de porteros."
        ),
        "beta_notice": "📱 ¡Te contactaremos tan pronto como la beta esté lista para descargar!",
        "features_heading": "Lo Que Te Espera",
        "features": [
            "Publica partidos y recibe ofertas competitivas de porteros",
            "Explora perfiles verificados de porteros con calificaciones y reseñas",
            "Sistema de pago seguro con protección de asistencia garantizada",
        ],
        "social_heading": "Mantente Conectado",
        "website_label": "🌐 Sitio Web",
        "instagram_label": "📷 Instagram",
        "support": "¿Tienes preguntas? ¡Estamos aquí para ayudar! Responde a este email o contáctanos en",
        "team": "Equipo GoalHero",
        "motto": "Haciendo los sueños alcanzables, un gol a la vez.",
        "copyright": "© 2025 GoalHero. Todos los derechos reservados.",
        "unsubscribe": "Darse de baja",
        "privacy": "Política de Privacidad",
    },
}


def get_base_template(
    title: str,
    preview_text: str,
    tagline: str,
    content_sections: str,
    footer_sections: str,
) -> str:
    """Base MJML template wrapper: logo banner, green header, content and footer"""
    return f"""
    <mjml>
      <mj-head>
        <mj-title>{title}</mj-title>
        <mj-preview>{preview_text}</mj-preview>
        <mj-attributes>
          <mj-all font-family="{FONT_STACK}" />
          <mj-text font-size="16px" line-height="1.6" color="{THEME['text_secondary']}" />
        </mj-attributes>
      </mj-head>
      <mj-body background-color="{THEME['background']}">
        <!-- Logo banner -->
        <mj-section background-color="{THEME['card_bg']}" padding="32px 20px 16px 20px">
          <mj-column>
            <mj-image
              src="{LOGO_URL}"
              alt="GoalHero Logo"
              width="96px"
              border-radius="20px"
              href="{WEBSITE_URL}"
              padding="0" />
          </mj-column>
        </mj-section>

        <!-- Header -->
        <mj-section background-color="{THEME['primary']}" padding="40px 30px">
          <mj-column>
            <mj-text align="center" font-size="32px" font-weight="700" color="#ffffff" line-height="1.3" padding="0 0 10px 0">
              {title}
            </mj-text>
            <mj-text align="center" font-size="18px" color="#ffffff" padding="0">
              {tagline}
            </mj-text>
          </mj-column>
        </mj-section>

        <!-- Main Content -->
        {content_sections}

        <!-- Footer -->
        <mj-section background-color="{THEME['text_primary']}" padding="30px">
          <mj-column>
            {footer_sections}
          </mj-column>
        </mj-section>
      </mj-body>
    </mjml>
    """


def _feature_list(features: list[str]) -> str:
    items = "<br/>\n".join(
        f'<span style="color: {THEME["primary"]};">✓</span> {feature}' for feature in features
    )
    return f"""
            <mj-text color="#2a2a2a" line-height="2" padding="0">
              {items}
            </mj-text>"""


def welcome_email_template(language: str) -> str:
    """Welcome email MJML template for a new beta signup"""
    copy = WELCOME_COPY.get(language)
    if copy is None:
        raise ValueError(f"No welcome email template for language '{language}'")

    content = f"""
        <mj-section background-color="{THEME['card_bg']}" padding="40px 30px 0 30px">
          <mj-column>
            <mj-text font-size="24px" font-weight="600" color="{THEME['text_primary']}" padding="0 0 16px 0">
              {copy['welcome_heading']}
            </mj-text>
            <mj-text padding="0">
              {copy['welcome_body']}
            </mj-text>
            <mj-text font-weight="600" color="{THEME['primary']}" padding="20px 0 0 0">
              {copy['beta_notice']}
            </mj-text>
          </mj-column>
        </mj-section>

        <!-- Features -->
        <mj-section background-color="{THEME['card_bg']}" padding="32px 30px 0 30px">
          <mj-column background-color="{THEME['panel_bg']}" padding="24px">
            <mj-text font-size="20px" font-weight="600" color="{THEME['text_primary']}" padding="0 0 12px 0">
              {copy['features_heading']}
            </mj-text>
            {_feature_list(copy['features'])}
          </mj-column>
        </mj-section>

        <!-- Social -->
        <mj-section background-color="{THEME['card_bg']}" padding="32px 30px 0 30px">
          <mj-column>
            <mj-text align="center" font-size="20px" font-weight="600" color="{THEME['text_primary']}" padding="0 0 16px 0">
              {copy['social_heading']}
            </mj-text>
            <mj-button
              href="{WEBSITE_URL}"
              background-color="{THEME['primary']}"
              color="#ffffff"
              font-weight="600"
              border-radius="25px"
              padding="4px">
              {copy['website_label']}
            </mj-button>
            <mj-button
              href="{INSTAGRAM_URL}"
              background-color="{THEME['instagram']}"
              color="#ffffff"
              font-weight="600"
              border-radius="25px"
              padding="4px">
              {copy['instagram_label']}
            </mj-button>
          </mj-column>
        </mj-section>

        <!-- Support -->
        <mj-section background-color="{THEME['card_bg']}" padding="40px 30px">
          <mj-column>
            <mj-divider border-color="{THEME['border']}" border-width="1px" padding="0 0 30px 0" />
            <mj-text align="center" color="{THEME['text_muted']}" padding="0">
              {copy['support']}
              <a href="mailto:{SUPPORT_EMAIL}" style="color: {THEME['link']};">{SUPPORT_EMAIL}</a>
            </mj-text>
          </mj-column>
        </mj-section>
    """

    footer = f"""
            <mj-text align="center" color="#ffffff" padding="0">
              <strong>{copy['team']}</strong>
            </mj-text>
            <mj-text align="center" color="#ffffff" padding="6px 0 0 0">
              {copy['motto']}
            </mj-text>
            <mj-text align="center" font-size="14px" color="#d1d5db" padding="20px 0 0 0">
              {copy['copyright']}<br/>
              <a href="#" style="color: #ffffff;">{copy['unsubscribe']}</a> | <a href="#" style="color: #ffffff;">{copy['privacy']}</a>
            </mj-text>
    """

    return get_base_template(
        title=copy["title"],
        preview_text=copy["beta_notice"],
        tagline=copy["tagline"],
        content_sections=content,
        footer_sections=footer,
    )


def welcome_email_subject(language: str) -> str:
    subject = WELCOME_SUBJECTS.get(language)
    if subject is None:
        raise ValueError(f"No welcome email subject for language '{language}'")
    return subject
