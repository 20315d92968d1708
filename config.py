# config.py

# --- RUTAS DE LA APLICACIÓN ---
# Página con la lista de facturas; se invalida y se redirige a ella tras cada cambio
INVOICES_PATH = '/dashboard/invoices'
# Destino tras un inicio de sesión correcto
DASHBOARD_PATH = '/dashboard'

# --- CONFIGURACIÓN DE AUTENTICACIÓN ---
# Estrategia fija que se le pide al proveedor de inicio de sesión
SIGN_IN_STRATEGY = 'credentials'
PASSWORD_MIN_LENGTH = 6
# bcrypt solo admite contraseñas de hasta 72 bytes
PASSWORD_MAX_BYTES = 72

# --- CONFIGURACIÓN DE CORS ---
CORS_ORIGINS = [
    "http://localhost:3000",
    "http://127.0.0.1:3000"
]

# --- CONFIGURACIÓN DE LOGS ---
LOG_FORMAT = '%(asctime)s - %(levelname)s - [%(funcName)s] - %(message)s'
