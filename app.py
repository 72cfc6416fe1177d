import logging
from datetime import timedelta
from functools import wraps

import pandas as pd

# Impor library Flask
from flask import (
    Blueprint,
    Flask,
    current_app,
    flash,
    g,
    redirect,
    render_template_string,
    request,
    session,
    url_for,
)

from credentials import CredentialStore
from html_templates import (
    HTML_ADMIN_PROFILE,
    HTML_CUSTOMER_PROFILE,
    HTML_ERROR,
    HTML_LAYOUT,
    HTML_LOGIN_REQUIRED,
    HTML_SERVICE_FORM,
    HTML_SERVICES,
    HTML_SERVICES_ERROR,
    HTML_SIGN_IN,
    HTML_SIGN_UP,
)
from logging_config import setup_logging
from pdam_api import NOT_AUTHENTICATED_MESSAGE, PdamAPI, Role, ensure_list
from settings import settings as default_settings

logger = logging.getLogger(__name__)

portal = Blueprint("portal", __name__)

SERVICE_FIELDS = ("name", "min_usage", "max_usage", "price")
LIST_VARIANTS = ("grid", "table")

PROFILE_ENDPOINTS = {
    Role.ADMIN: "portal.admin_profile_page",
    Role.CUSTOMER: "portal.customer_profile_page",
}


# --- Fungsi Format Rupiah ---
def format_rupiah(value):
    """Format angka menjadi string Rupiah 'Rp 1.000.000'."""
    try:
        return f"Rp {int(float(value)):,}".replace(",", ".")
    except (ValueError, TypeError, OverflowError):
        return "Rp 0"


# ---------------- Helper Functions ----------------
def get_api():
    return current_app.extensions["pdam_api"]


def get_store():
    settings = current_app.extensions["pdam_settings"]
    return CredentialStore(session, max_age=settings.token_max_age)


def render_page(content, status=200, **context):
    full_html = HTML_LAYOUT.replace('{% block content %}{% endblock %}', content)
    return render_template_string(full_html, **context), status


def render_login_required(message=NOT_AUTHENTICATED_MESSAGE):
    return render_page(HTML_LOGIN_REQUIRED, status=401, title="Login Diperlukan", message=message)


def session_expired():
    """Backend menolak token: hapus token lama lalu minta login ulang."""
    logger.info("Token ditolak backend, dihapus dari sesi")
    get_store().delete()
    return render_login_required("Sesi Anda telah berakhir")


def parse_service_form(form):
    """Ambil dan validasi field layanan dari form.

    Mengembalikan (values, payload, error). Batas min_usage <= max_usage sengaja
    tidak diperiksa di sini; backend yang menentukan.
    """
    values = {field: form.get(field, "").strip() for field in SERVICE_FIELDS}
    if not values["name"]:
        return values, None, "Nama layanan wajib diisi."

    payload = {"name": values["name"]}
    labels = {"min_usage": "Min usage", "max_usage": "Max usage", "price": "Harga"}
    for field, label in labels.items():
        try:
            payload[field] = int(values[field])
        except ValueError:
            return values, None, f"{label} harus berupa angka."
    return values, payload, None


def sort_services(services):
    """Urutkan tarif berdasarkan min_usage untuk ditampilkan.

    Baris dikembalikan apa adanya (tidak melewati DataFrame) supaya angka
    tidak berubah jadi float. Nilai min_usage yang kosong atau bukan angka
    ditaruh di akhir dengan urutan dari server.
    """
    rows = [row for row in services if isinstance(row, dict)]
    if not rows:
        return []
    min_usage = pd.Series([row.get("min_usage") for row in rows], dtype=object)
    order = pd.to_numeric(min_usage, errors="coerce").sort_values(kind="stable", na_position="last")
    return [rows[i] for i in order.index]


def upstream_status(result):
    """Status HTTP halaman error: status backend, atau 502 kalau koneksi gagal."""
    return result.http_status if result.http_status >= 400 else 502
# --- Akhir Helper Functions ---


# ---------------- Decorator ----------------
def login_required(f):
    @wraps(f)
    def decorated_function(*args, **kwargs):
        token = get_store().read()
        if not token:
            return render_login_required()
        g.token = token
        return f(*args, **kwargs)
    return decorated_function
# --- Akhir Decorator ---


@portal.app_context_processor
def inject_login_state():
    return {"logged_in": bool(get_store().read())}


# ---------------- RUTE FLASK ----------------

@portal.route("/")
def index_page():
    return redirect(url_for('portal.sign_in_page'))


# --- Rute Login ---
@portal.route("/sign-in", methods=["GET", "POST"])
def sign_in_page():
    if request.method == "POST":
        username = request.form.get("username", "").strip()
        password = request.form.get("password", "")

        if not username or not password:
            flash("Username dan password tidak boleh kosong.", "danger")
            return redirect(url_for('portal.sign_in_page'))

        result = get_api().authenticate(username, password)

        if not result.ok:
            flash(result.message, "danger")
            return redirect(url_for('portal.sign_in_page'))

        if not result.success:
            # Username / password salah
            flash(result.message or "Username atau password salah.", "warning")
            return redirect(url_for('portal.sign_in_page'))

        payload = result.data if isinstance(result.data, dict) else {}
        token = payload.get("token")
        role = Role.parse(payload.get("role"))
        if not token or role is None:
            logger.error("Respons login untuk %s tanpa token atau role tidak dikenal: %r", username, payload.get("role"))
            flash("Respons login tidak valid.", "danger")
            return redirect(url_for('portal.sign_in_page'))

        get_store().store(token)
        logger.info("%s login sebagai %s", username, role.value)
        flash(result.message or "Login berhasil!", "success")
        return redirect(url_for(PROFILE_ENDPOINTS[role]))

    return render_page(HTML_SIGN_IN, title="Login", username="")
# --- Akhir Rute Login ---


@portal.route("/sign-up", methods=["GET", "POST"])
def sign_up_page():
    form = {}
    if request.method == "POST":
        form = {field: request.form.get(field, "").strip() for field in ("username", "name", "phone")}
        password = request.form.get("password", "")

        if not all(form.values()) or not password:
            flash("Semua field wajib diisi.", "danger")
            return render_page(HTML_SIGN_UP, status=400, title="Daftar", form=form)

        result = get_api().register_admin(form["username"], password, form["name"], form["phone"])
        if result.ok and result.success:
            logger.info("Admin %s berhasil didaftarkan", form["username"])
            flash(result.message or "Registrasi berhasil!", "success")
            return redirect(url_for('portal.sign_up_page'))

        flash(result.message or "Gagal melakukan registrasi", "danger")

    return render_page(HTML_SIGN_UP, title="Daftar", form=form)


@portal.route("/logout")
def logout_page():
    get_store().delete()
    flash("Anda telah berhasil logout.", "success")
    return redirect(url_for('portal.sign_in_page'))


# --- Rute Profil ---
@portal.route("/admin/profile")
@login_required
def admin_profile_page():
    result = get_api().get_admin_profile(g.token)
    if result.unauthorized:
        return session_expired()
    if not (result.ok and result.success) or not isinstance(result.data, dict):
        return render_page(
            HTML_ERROR, title="Profil Admin",
            heading="Gagal mengambil data profil", message=result.message,
            backend_status=result.http_status, status=upstream_status(result),
        )

    admin = result.data
    user = admin.get("user") if isinstance(admin.get("user"), dict) else {}
    return render_page(HTML_ADMIN_PROFILE, title="Profil Admin", admin=admin, user=user)


@portal.route("/customer/profile")
@login_required
def customer_profile_page():
    result = get_api().get_customer_profile(g.token)
    if result.unauthorized:
        return session_expired()
    if not (result.ok and result.success) or not isinstance(result.data, dict):
        return render_page(
            HTML_ERROR, title="Profil Pelanggan",
            heading="Gagal memuat data customer", message=result.message,
            backend_status=result.http_status, status=upstream_status(result),
        )

    customer = result.data
    user = customer.get("user") if isinstance(customer.get("user"), dict) else {}
    # "service" bisa berupa satu objek atau list
    services = ensure_list(customer.get("service"))
    return render_page(
        HTML_CUSTOMER_PROFILE, title="Profil Pelanggan",
        customer=customer, user=user, services=services,
    )


# --- Rute Layanan ---
@portal.route("/admin/services")
@login_required
def services_page():
    variant = request.args.get("variant", "grid")
    if variant not in LIST_VARIANTS:
        variant = "grid"

    result = get_api().list_services(g.token)
    if result.unauthorized:
        return session_expired()
    if not result.success:
        return render_page(HTML_SERVICES_ERROR, title="Layanan", message=result.message)

    services = sort_services(result.items())
    count = result.count if result.count is not None else len(services)
    return render_page(HTML_SERVICES, title="Layanan", services=services, count=count, variant=variant)


@portal.route("/admin/services/add", methods=["GET", "POST"])
@login_required
def add_service_page():
    context = dict(
        title="Tambah Layanan",
        heading="Tambah Layanan",
        subheading="Buat layanan PDAM baru dengan mengisi form di bawah",
        submit_label="Simpan Layanan",
        action=url_for('portal.add_service_page'),
        form={},
        error=None,
    )
    if request.method == "POST":
        values, payload, error = parse_service_form(request.form)
        context["form"] = values
        if error:
            context["error"] = error
            return render_page(HTML_SERVICE_FORM, status=400, **context)

        result = get_api().create_service(g.token, payload)
        if result.unauthorized:
            return session_expired()
        if result.ok and result.success:
            logger.info("Layanan %r ditambahkan", payload["name"])
            flash(result.message or "Layanan berhasil ditambahkan", "success")
            return redirect(url_for('portal.services_page'))

        context["error"] = result.message or "Gagal menambahkan layanan"

    return render_page(HTML_SERVICE_FORM, **context)


@portal.route("/admin/services/edit/<int:service_id>", methods=["GET", "POST"])
@login_required
def edit_service_page(service_id):
    api = get_api()
    context = dict(
        title="Edit Layanan",
        heading="✏️ Edit Service",
        subheading=f"Perbarui data layanan #{service_id}",
        submit_label="Simpan Perubahan",
        action=url_for('portal.edit_service_page', service_id=service_id),
        form={},
        error=None,
    )

    if request.method == "POST":
        values, payload, error = parse_service_form(request.form)
        context["form"] = values
        if error:
            context["error"] = error
            return render_page(HTML_SERVICE_FORM, status=400, **context)

        result = api.update_service(g.token, service_id, payload)
        if result.unauthorized:
            return session_expired()
        if result.ok and result.success:
            logger.info("Layanan %s diperbarui", service_id)
            flash(result.message or "Service berhasil diperbarui", "success")
            return redirect(url_for('portal.services_page'))

        flash(result.message or "Gagal update service", "danger")
        return render_page(HTML_SERVICE_FORM, **context)

    result = api.get_service(g.token, service_id)
    if result.unauthorized:
        return session_expired()
    if not (result.ok and result.success) or not isinstance(result.data, dict):
        flash("Gagal mengambil data service", "danger")
        return redirect(url_for('portal.services_page'))

    context["form"] = {field: result.data.get(field, "") for field in SERVICE_FIELDS}
    return render_page(HTML_SERVICE_FORM, **context)


# ---------------- Pembuatan Aplikasi ----------------
def create_app(settings=None, api=None):
    """Bangun aplikasi Flask.

    ``settings`` dan ``api`` bisa diganti dari luar (dipakai oleh test).
    """
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file or None)

    app = Flask(__name__)
    app.secret_key = settings.secret_key
    # Token hanya dikirim lewat cookie sesi: tidak terbaca JavaScript,
    # hanya untuk request same-site, dan kedaluwarsa sesuai token_max_age.
    app.config.update(
        SESSION_COOKIE_HTTPONLY=True,
        SESSION_COOKIE_SAMESITE="Strict",
        PERMANENT_SESSION_LIFETIME=timedelta(seconds=settings.token_max_age),
    )
    app.jinja_env.filters['rupiah'] = format_rupiah

    app.extensions["pdam_settings"] = settings
    app.extensions["pdam_api"] = api or PdamAPI(
        base_url=settings.base_url,
        app_key=settings.app_key,
        timeout=settings.request_timeout,
    )
    app.register_blueprint(portal)

    logger.info("Portal PDAM siap, backend: %s", settings.base_url)
    return app


# ---------------- Menjalankan Aplikasi (LOKAL) ----------------
if __name__ == "__main__":
    config = default_settings
    create_app(config).run(debug=config.debug, port=config.port)
