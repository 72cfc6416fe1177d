# ---------------- KUMPULAN TEMPLATE HTML ----------------
# Semua halaman dirender dengan render_template_string: konten halaman
# disisipkan ke dalam HTML_LAYOUT lewat render_page() di app.py.

HTML_LAYOUT = """
<!DOCTYPE html>
<html lang="id">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{{ title }} - Portal PDAM</title>
    <script src="https://cdn.tailwindcss.com"></script>
    <style>
        body { font-family: 'Inter', sans-serif; }
    </style>
</head>
<body class="bg-gradient-to-br from-slate-900 via-emerald-900 to-slate-900 min-h-screen">
    <nav class="bg-slate-900/60 backdrop-blur border-b border-emerald-500/30">
        <div class="max-w-7xl mx-auto px-4 sm:px-6 lg:px-8">
            <div class="flex justify-between h-16">
                <div class="flex">
                    <a href="{{ url_for('portal.index_page') }}" class="flex-shrink-0 flex items-center text-xl font-bold text-emerald-400">
                        💧 Portal PDAM
                    </a>
                </div>
                <div class="flex items-center space-x-1">
                    {% if logged_in %}
                        <a href="{{ url_for('portal.admin_profile_page') }}" class="px-3 py-2 rounded-md text-sm font-medium text-emerald-200 hover:bg-emerald-500/20">Profil Admin</a>
                        <a href="{{ url_for('portal.services_page') }}" class="px-3 py-2 rounded-md text-sm font-medium text-emerald-200 hover:bg-emerald-500/20">Layanan</a>
                        <a href="{{ url_for('portal.customer_profile_page') }}" class="px-3 py-2 rounded-md text-sm font-medium text-emerald-200 hover:bg-emerald-500/20">Profil Pelanggan</a>
                        <a href="{{ url_for('portal.logout_page') }}" class="ml-4 px-3 py-2 rounded-md text-sm font-medium text-red-300 bg-red-500/20 hover:bg-red-500/30">Logout</a>
                    {% else %}
                        <a href="{{ url_for('portal.sign_in_page') }}" class="px-3 py-2 rounded-md text-sm font-medium text-emerald-200 hover:bg-emerald-500/20">Login</a>
                        <a href="{{ url_for('portal.sign_up_page') }}" class="px-3 py-2 rounded-md text-sm font-medium text-emerald-200 hover:bg-emerald-500/20">Daftar</a>
                    {% endif %}
                </div>
            </div>
        </div>
    </nav>

    <main>
        <div class="max-w-6xl mx-auto py-8 px-4 sm:px-6 lg:px-8">
            {% with messages = get_flashed_messages(with_categories=true) %}
              {% if messages %}
                {% for category, message in messages %}
                  <div class="{% if category == 'success' %}bg-emerald-100 border-emerald-400 text-emerald-800{% elif category == 'warning' %}bg-amber-100 border-amber-400 text-amber-800{% else %}bg-red-100 border-red-400 text-red-700{% endif %} border px-4 py-3 rounded-md relative mb-4" role="alert">
                    <span class="block sm:inline">{{ message }}</span>
                  </div>
                {% endfor %}
              {% endif %}
            {% endwith %}

            {% block content %}{% endblock %}
        </div>
    </main>
</body>
</html>
"""

HTML_SIGN_IN = """
<div class="flex items-center justify-center py-12">
    <div class="bg-slate-800/40 backdrop-blur-xl p-8 w-full md:w-1/2 lg:w-1/3 rounded-3xl shadow-2xl border border-emerald-500/30">
        <div class="text-center mb-8">
            <div class="inline-flex items-center justify-center w-16 h-16 bg-gradient-to-br from-emerald-500 to-cyan-600 rounded-2xl mb-4 shadow-lg">
                <span class="text-2xl">🔐</span>
            </div>
            <h1 class="text-3xl font-bold text-emerald-400 mb-2">Login PDAM</h1>
            <p class="text-emerald-300/80 text-sm">Masuk ke akun Anda untuk melanjutkan</p>
        </div>

        <form action="{{ url_for('portal.sign_in_page') }}" method="POST" class="space-y-4">
            <div>
                <label for="username" class="block text-sm font-bold text-emerald-300 mb-3 uppercase tracking-wider">👤 Username</label>
                <input type="text" id="username" name="username" value="{{ username or '' }}" required
                       class="w-full px-4 py-3 bg-slate-800/50 border-2 border-emerald-500/40 rounded-lg text-emerald-100 focus:outline-none focus:border-emerald-400"
                       placeholder="Masukkan username Anda">
            </div>
            <div>
                <label for="password" class="block text-sm font-bold text-emerald-300 mb-3 uppercase tracking-wider">🔑 Password</label>
                <input type="password" id="password" name="password" required
                       class="w-full px-4 py-3 bg-slate-800/50 border-2 border-emerald-500/40 rounded-lg text-emerald-100 focus:outline-none focus:border-emerald-400"
                       placeholder="Masukkan password Anda">
            </div>
            <button type="submit" class="w-full py-3 bg-gradient-to-r from-emerald-500 to-cyan-600 hover:from-emerald-600 hover:to-cyan-700 text-white font-bold rounded-xl mt-6">
                Masuk
            </button>
        </form>

        <p class="text-center text-sm text-emerald-300/80 mt-6">
            Belum punya akun?
            <a href="{{ url_for('portal.sign_up_page') }}" class="ml-2 font-bold text-emerald-400 hover:text-cyan-400">Daftar sekarang →</a>
        </p>
    </div>
</div>
"""

HTML_SIGN_UP = """
<div class="flex items-center justify-center py-12">
    <div class="bg-slate-800/40 backdrop-blur-xl p-8 w-full md:w-1/2 lg:w-1/3 rounded-3xl shadow-2xl border border-emerald-500/30">
        <div class="text-center mb-8">
            <div class="inline-flex items-center justify-center w-16 h-16 bg-gradient-to-br from-emerald-500 to-cyan-600 rounded-2xl mb-4 shadow-lg">
                <span class="text-2xl">📝</span>
            </div>
            <h1 class="text-3xl font-bold text-emerald-400 mb-2">Daftar Admin</h1>
            <p class="text-emerald-300/80 text-sm">Buat akun admin PDAM baru</p>
        </div>

        <form action="{{ url_for('portal.sign_up_page') }}" method="POST" class="space-y-4">
            {% for field, label, kind, placeholder in [
                ('username', '👤 Username', 'text', 'Masukkan username'),
                ('password', '🔑 Password', 'password', 'Buat password yang kuat'),
                ('name', '🪪 Nama Lengkap', 'text', 'Masukkan nama lengkap'),
                ('phone', '📱 Nomor Telepon', 'tel', 'Contoh: 081234567890'),
            ] %}
            <div>
                <label for="{{ field }}" class="block text-sm font-bold text-emerald-300 mb-3 uppercase tracking-wider">{{ label }}</label>
                <input type="{{ kind }}" id="{{ field }}" name="{{ field }}" required
                       value="{% if kind != 'password' %}{{ form.get(field, '') }}{% endif %}"
                       class="w-full px-4 py-3 bg-slate-800/50 border-2 border-emerald-500/40 rounded-lg text-emerald-100 focus:outline-none focus:border-emerald-400"
                       placeholder="{{ placeholder }}">
            </div>
            {% endfor %}
            <button type="submit" class="w-full py-3 bg-gradient-to-r from-emerald-500 to-cyan-600 hover:from-emerald-600 hover:to-cyan-700 text-white font-bold rounded-xl mt-6">
                Daftar
            </button>
        </form>

        <p class="text-center text-sm text-emerald-300/80 mt-6">
            Sudah punya akun?
            <a href="{{ url_for('portal.sign_in_page') }}" class="ml-2 font-bold text-emerald-400 hover:text-cyan-400">Masuk →</a>
        </p>
    </div>
</div>
"""

HTML_LOGIN_REQUIRED = """
<div class="flex items-center justify-center py-16">
    <div class="bg-slate-800/50 backdrop-blur-xl p-8 rounded-3xl border border-emerald-500/30 text-center">
        <span class="text-4xl">🔐</span>
        <p class="text-red-400 text-lg font-semibold mt-4">{{ message }}</p>
        <p class="text-emerald-300/70 text-sm mt-2">Silakan login terlebih dahulu</p>
        <a href="{{ url_for('portal.sign_in_page') }}" class="inline-block mt-6 px-6 py-2 rounded-xl bg-emerald-500 hover:bg-emerald-600 text-white font-bold">Ke Halaman Login</a>
    </div>
</div>
"""

HTML_ERROR = """
<div class="flex items-center justify-center py-16">
    <div class="bg-slate-800/50 backdrop-blur-xl p-8 rounded-3xl border border-emerald-500/30 text-center">
        <span class="text-4xl">⚠️</span>
        <p class="text-red-400 font-semibold mt-4">{{ heading }}</p>
        <p class="text-emerald-300/70 text-sm mt-2">{{ message }}</p>
        {% if backend_status %}
        <p class="text-emerald-300/70 text-sm mt-2">Status: {{ backend_status }}</p>
        {% endif %}
    </div>
</div>
"""

HTML_ADMIN_PROFILE = """
<div class="mb-10">
    <h1 class="text-4xl font-bold text-emerald-400">Profil Administrator</h1>
    <p class="text-emerald-300/70 mt-2">Kelola akun admin Anda</p>
</div>

<div class="bg-slate-800/40 backdrop-blur-xl rounded-3xl border border-emerald-500/30 shadow-2xl overflow-hidden">
    <div class="h-32 bg-gradient-to-r from-emerald-600 to-cyan-700"></div>
    <div class="p-8 -mt-16">
        <div class="flex justify-center mb-8">
            <div class="w-32 h-32 bg-gradient-to-br from-emerald-500 to-cyan-600 rounded-full flex items-center justify-center border-4 border-slate-900 text-white text-5xl font-bold shadow-lg">
                {{ (admin.get('name') or 'A')[:1] | upper }}
            </div>
        </div>
        <div class="text-center mb-8">
            <h2 class="text-3xl font-bold text-emerald-100">{{ admin.get('name', '-') }}</h2>
            <p class="text-emerald-400">@{{ user.get('username', '-') }}</p>
        </div>
        <div class="grid grid-cols-1 md:grid-cols-3 gap-6">
            <div class="bg-slate-900/50 rounded-xl p-5 border border-emerald-500/20">
                <p class="text-xs text-emerald-400 font-semibold uppercase">Nomor Telepon</p>
                <p class="text-lg font-bold text-emerald-100 mt-1">{{ admin.get('phone', '-') }}</p>
            </div>
            <div class="bg-slate-900/50 rounded-xl p-5 border border-emerald-500/20">
                <p class="text-xs text-emerald-400 font-semibold uppercase">Role</p>
                <p class="text-lg font-bold text-emerald-100 mt-1">{{ user.get('role', '-') }}</p>
            </div>
            <div class="bg-slate-900/50 rounded-xl p-5 border border-emerald-500/20">
                <p class="text-xs text-emerald-400 font-semibold uppercase">Status</p>
                <p class="text-lg font-bold text-emerald-300 mt-1">Aktif</p>
            </div>
        </div>
        <div class="flex justify-center mt-8">
            <a href="{{ url_for('portal.services_page') }}" class="bg-gradient-to-r from-emerald-500 to-cyan-600 text-white font-bold px-7 py-3 rounded-xl">💧 Kelola Layanan</a>
        </div>
    </div>
</div>
"""

HTML_CUSTOMER_PROFILE = """
<div class="space-y-8">
    <div class="bg-slate-800/40 backdrop-blur-xl border border-emerald-500/30 rounded-3xl p-8">
        <div class="flex items-center gap-6 mb-6">
            <div class="w-20 h-20 rounded-2xl bg-gradient-to-br from-emerald-500 to-cyan-600 flex items-center justify-center text-white text-3xl font-bold">
                {{ (customer.get('name') or 'C')[:1] | upper }}
            </div>
            <div>
                <h1 class="text-2xl font-bold text-emerald-100">{{ customer.get('name', '-') }}</h1>
                <p class="text-emerald-400 text-sm">@{{ user.get('username', '-') }}</p>
            </div>
        </div>
        <div class="grid grid-cols-1 md:grid-cols-2 gap-6">
            {% for label, value in [
                ('Nomor Telepon', customer.get('phone') or '-'),
                ('Alamat', customer.get('address') or '-'),
                ('Role', user.get('role') or '-'),
                ('Status', 'Aktif'),
            ] %}
            <div class="bg-slate-900/50 rounded-xl p-4 border border-emerald-500/20">
                <p class="text-xs text-emerald-400 font-semibold uppercase">{{ label }}</p>
                <p class="text-lg font-bold text-emerald-100 mt-1">{{ value }}</p>
            </div>
            {% endfor %}
        </div>
    </div>

    <div class="bg-slate-800/40 backdrop-blur-xl border border-emerald-500/30 rounded-3xl p-8">
        <h2 class="text-xl font-bold text-emerald-300 mb-6">🔧 Layanan Anda</h2>
        {% if services %}
        <div class="grid grid-cols-1 md:grid-cols-2 gap-4">
            {% for s in services %}
            <div class="p-5 rounded-2xl bg-slate-900/60 border border-emerald-500/20">
                <p class="text-emerald-100 font-semibold">{{ s.get('name', '-') }}</p>
                <p class="text-sm text-emerald-400 mt-1">Pemakaian {{ s.get('min_usage', 0) }} – {{ s.get('max_usage', 0) }} m³</p>
                <p class="text-lg font-bold text-emerald-200 mt-2">{{ s.get('price', 0) | rupiah }}</p>
            </div>
            {% endfor %}
        </div>
        {% else %}
        <p class="text-emerald-400">Belum terdaftar pada layanan apa pun</p>
        {% endif %}
    </div>
</div>
"""

HTML_SERVICES = """
<div class="space-y-8">
    <div class="flex justify-between items-start">
        <div>
            <h1 class="text-4xl font-bold text-emerald-400">💧 Services</h1>
            <p class="text-emerald-300/80">Kelola {{ count }} layanan PDAM</p>
            <p class="text-xs text-emerald-300/60 mt-2">
                Tampilan:
                <a href="{{ url_for('portal.services_page', variant='grid') }}" class="{% if variant == 'grid' %}font-bold text-emerald-200{% endif %}">Kartu</a> |
                <a href="{{ url_for('portal.services_page', variant='table') }}" class="{% if variant == 'table' %}font-bold text-emerald-200{% endif %}">Tabel</a>
            </p>
        </div>
        <a href="{{ url_for('portal.add_service_page') }}" class="bg-gradient-to-r from-emerald-500 to-emerald-600 hover:from-emerald-600 hover:to-emerald-700 text-white font-bold px-7 py-3 rounded-xl shadow-lg">
            ➕ Tambah Layanan
        </a>
    </div>

    {% if not services %}
    <div class="rounded-2xl bg-amber-500/20 border border-amber-400/50 px-8 py-12 text-center">
        <span class="text-5xl block mb-4">📭</span>
        <p class="text-lg font-semibold text-amber-200">Tidak ada data layanan</p>
    </div>
    {% elif variant == 'table' %}
    <div class="overflow-x-auto rounded-lg border border-gray-200 bg-white">
        <table class="min-w-full divide-y divide-gray-200">
            <thead class="bg-gray-50">
                <tr>
                    <th class="px-4 py-3 text-left text-xs font-medium text-gray-500 uppercase tracking-wider">ID</th>
                    <th class="px-4 py-3 text-left text-xs font-medium text-gray-500 uppercase tracking-wider">Nama</th>
                    <th class="px-4 py-3 text-left text-xs font-medium text-gray-500 uppercase tracking-wider">Min Usage</th>
                    <th class="px-4 py-3 text-left text-xs font-medium text-gray-500 uppercase tracking-wider">Max Usage</th>
                    <th class="px-4 py-3 text-left text-xs font-medium text-gray-500 uppercase tracking-wider">Harga</th>
                    <th class="px-4 py-3 text-left text-xs font-medium text-gray-500 uppercase tracking-wider">Aksi</th>
                </tr>
            </thead>
            <tbody class="bg-white divide-y divide-gray-200">
                {% for service in services %}
                <tr>
                    <td class="px-4 py-3 whitespace-nowrap text-sm text-gray-500">#{{ service['id'] }}</td>
                    <td class="px-4 py-3 whitespace-nowrap text-sm text-gray-900">{{ service['name'] }}</td>
                    <td class="px-4 py-3 whitespace-nowrap text-sm text-gray-900">{{ service['min_usage'] }}</td>
                    <td class="px-4 py-3 whitespace-nowrap text-sm text-gray-900">{{ service['max_usage'] }}</td>
                    <td class="px-4 py-3 whitespace-nowrap text-sm text-gray-900">{{ service['price'] | rupiah }}</td>
                    <td class="px-4 py-3 whitespace-nowrap text-sm">
                        <a href="{{ url_for('portal.edit_service_page', service_id=service['id']) }}" class="text-emerald-600 hover:text-emerald-900 font-medium">Edit</a>
                    </td>
                </tr>
                {% endfor %}
            </tbody>
        </table>
    </div>
    {% else %}
    <div class="grid grid-cols-1 lg:grid-cols-2 gap-4">
        {% for service in services %}
        <div class="relative rounded-2xl bg-gradient-to-br from-emerald-500/10 to-cyan-500/10 border border-emerald-500/30 hover:border-emerald-400/60 p-6 shadow-lg">
            <div class="absolute top-4 right-4 text-xs font-bold bg-emerald-500/80 text-white px-3 py-1 rounded-full">#{{ service['id'] }}</div>
            <div class="space-y-4">
                <h3 class="text-2xl font-bold text-emerald-100">{{ service['name'] }}</h3>
                <div class="grid grid-cols-2 gap-4">
                    <div class="bg-slate-800/40 rounded-lg p-3">
                        <p class="text-xs text-emerald-400 font-semibold">Min Usage</p>
                        <p class="text-lg font-bold text-emerald-100">{{ service['min_usage'] }}</p>
                    </div>
                    <div class="bg-slate-800/40 rounded-lg p-3">
                        <p class="text-xs text-emerald-400 font-semibold">Max Usage</p>
                        <p class="text-lg font-bold text-emerald-100">{{ service['max_usage'] }}</p>
                    </div>
                    <div class="col-span-2 bg-emerald-500/30 rounded-lg p-3">
                        <p class="text-xs text-emerald-300 font-semibold">💰 Harga</p>
                        <p class="text-xl font-bold text-emerald-100">{{ service['price'] | rupiah }}</p>
                    </div>
                </div>
                <div class="flex justify-end pt-4">
                    <a href="{{ url_for('portal.edit_service_page', service_id=service['id']) }}" class="px-4 py-2 rounded-lg text-sm font-semibold bg-emerald-500/20 text-emerald-300 hover:bg-emerald-500 hover:text-black">✏️ Edit</a>
                </div>
            </div>
        </div>
        {% endfor %}
    </div>
    {% endif %}
</div>
"""

HTML_SERVICES_ERROR = """
<div class="rounded-2xl bg-red-50 border border-red-200 px-6 py-5">
    <p class="text-lg font-bold text-red-700">Error: {{ message }}</p>
</div>
"""

# Dipakai bersama oleh halaman tambah dan edit layanan.
HTML_SERVICE_FORM = """
<div class="max-w-2xl mx-auto">
    <a href="{{ url_for('portal.services_page') }}" class="inline-flex items-center gap-2 text-emerald-400 hover:text-emerald-300 font-semibold mb-6">← Kembali</a>
    <h1 class="text-4xl font-bold text-emerald-400 mb-2">{{ heading }}</h1>
    <p class="text-emerald-300/80 mb-8">{{ subheading }}</p>

    {% if error %}
    <div class="bg-red-100 border border-red-400 text-red-700 px-4 py-3 rounded-md mb-6" role="alert">{{ error }}</div>
    {% endif %}

    <form action="{{ action }}" method="POST" class="space-y-6 bg-slate-800/40 backdrop-blur border border-emerald-500/30 rounded-2xl p-6 shadow-lg">
        <div>
            <label for="name" class="text-emerald-300 text-sm">Nama Layanan</label>
            <input id="name" name="name" value="{{ form.get('name', '') }}" required
                   class="w-full mt-1 px-4 py-2 rounded-lg bg-slate-900/60 text-white border border-emerald-500/30 focus:outline-none focus:border-emerald-400"
                   placeholder="Contoh: Sambungan Rumah">
        </div>
        <div class="grid grid-cols-2 gap-4">
            <div>
                <label for="min_usage" class="text-emerald-300 text-sm">Min Usage</label>
                <input id="min_usage" name="min_usage" type="number" value="{{ form.get('min_usage', '') }}" required
                       class="w-full mt-1 px-4 py-2 rounded-lg bg-slate-900/60 text-white border border-emerald-500/30">
            </div>
            <div>
                <label for="max_usage" class="text-emerald-300 text-sm">Max Usage</label>
                <input id="max_usage" name="max_usage" type="number" value="{{ form.get('max_usage', '') }}" required
                       class="w-full mt-1 px-4 py-2 rounded-lg bg-slate-900/60 text-white border border-emerald-500/30">
            </div>
        </div>
        <div>
            <label for="price" class="text-emerald-300 text-sm">Harga</label>
            <input id="price" name="price" type="number" value="{{ form.get('price', '') }}" required
                   class="w-full mt-1 px-4 py-2 rounded-lg bg-slate-900/60 text-white border border-emerald-500/30">
        </div>
        <div class="flex gap-3">
            <button type="submit" class="bg-gradient-to-r from-emerald-500 to-cyan-500 hover:from-emerald-600 hover:to-cyan-600 text-white font-bold px-6 py-2 rounded-xl">{{ submit_label }}</button>
            <a href="{{ url_for('portal.services_page') }}" class="px-6 py-2 rounded-xl border border-emerald-500/40 text-emerald-300 hover:bg-emerald-500/10">Batal</a>
        </div>
    </form>
</div>
"""
