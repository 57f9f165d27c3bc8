"""Identifiers carried on the wire: fault codes, UART command ids and CAN packet ids."""

from __future__ import annotations

from enum import IntEnum, auto, unique


@unique
class FaultCode(IntEnum):
    """Fault reported by the motor controller."""

    NONE = 0
    OVER_VOLTAGE = auto()
    UNDER_VOLTAGE = auto()
    DRV = auto()
    ABS_OVER_CURRENT = auto()
    OVER_TEMP_FET = auto()
    OVER_TEMP_MOTOR = auto()
    GATE_DRIVER_OVER_VOLTAGE = auto()
    GATE_DRIVER_UNDER_VOLTAGE = auto()
    MCU_UNDER_VOLTAGE = auto()
    BOOTING_FROM_WATCHDOG_RESET = auto()
    ENCODER_SPI = auto()
    ENCODER_SINCOS_BELOW_MIN_AMPLITUDE = auto()
    ENCODER_SINCOS_ABOVE_MAX_AMPLITUDE = auto()
    FLASH_CORRUPTION = auto()
    HIGH_OFFSET_CURRENT_SENSOR_1 = auto()
    HIGH_OFFSET_CURRENT_SENSOR_2 = auto()
    HIGH_OFFSET_CURRENT_SENSOR_3 = auto()
    UNBALANCED_CURRENTS = auto()
    BRK = auto()
    RESOLVER_LOT = auto()
    RESOLVER_DOS = auto()
    RESOLVER_LOS = auto()
    FLASH_CORRUPTION_APP_CFG = auto()
    FLASH_CORRUPTION_MC_CFG = auto()
    ENCODER_NO_MAGNET = auto()
    ENCODER_MAGNET_TOO_STRONG = auto()
    PHASE_FILTER = auto()


@unique
class CommPacketId(IntEnum):
    """Command id in the first byte of a UART payload."""

    FW_VERSION = 0
    JUMP_TO_BOOTLOADER = auto()
    ERASE_NEW_APP = auto()
    WRITE_NEW_APP_DATA = auto()
    GET_VALUES = auto()
    SET_DUTY = auto()
    SET_CURRENT = auto()
    SET_CURRENT_BRAKE = auto()
    SET_RPM = auto()
    SET_POS = auto()
    SET_HANDBRAKE = auto()
    SET_DETECT = auto()
    SET_SERVO_POS = auto()
    SET_MCCONF = auto()
    GET_MCCONF = auto()
    GET_MCCONF_DEFAULT = auto()
    SET_APPCONF = auto()
    GET_APPCONF = auto()
    GET_APPCONF_DEFAULT = auto()
    SAMPLE_PRINT = auto()
    TERMINAL_CMD = auto()
    PRINT = auto()
    ROTOR_POSITION = auto()
    EXPERIMENT_SAMPLE = auto()
    DETECT_MOTOR_PARAM = auto()
    DETECT_MOTOR_R_L = auto()
    DETECT_MOTOR_FLUX_LINKAGE = auto()
    DETECT_ENCODER = auto()
    DETECT_HALL_FOC = auto()
    REBOOT = auto()
    ALIVE = auto()
    GET_DECODED_PPM = auto()
    GET_DECODED_ADC = auto()
    GET_DECODED_CHUK = auto()
    FORWARD_CAN = auto()
    SET_CHUCK_DATA = auto()
    CUSTOM_APP_DATA = auto()
    NRF_START_PAIRING = auto()
    GPD_SET_FSW = auto()
    GPD_BUFFER_NOTIFY = auto()
    GPD_BUFFER_SIZE_LEFT = auto()
    GPD_FILL_BUFFER = auto()
    GPD_OUTPUT_SAMPLE = auto()
    GPD_SET_MODE = auto()
    GPD_FILL_BUFFER_INT8 = auto()
    GPD_FILL_BUFFER_INT16 = auto()
    GPD_SET_BUFFER_INT_SCALE = auto()
    GET_VALUES_SETUP = auto()
    SET_MCCONF_TEMP = auto()
    SET_MCCONF_TEMP_SETUP = auto()
    GET_VALUES_SELECTIVE = auto()
    GET_VALUES_SETUP_SELECTIVE = auto()
    EXT_NRF_PRESENT = auto()
    EXT_NRF_ESB_SET_CH_ADDR = auto()
    EXT_NRF_ESB_SEND_DATA = auto()
    EXT_NRF_ESB_RX_DATA = auto()
    EXT_NRF_SET_ENABLED = auto()
    DETECT_MOTOR_FLUX_LINKAGE_OPENLOOP = auto()
    DETECT_APPLY_ALL_FOC = auto()
    JUMP_TO_BOOTLOADER_ALL_CAN = auto()
    ERASE_NEW_APP_ALL_CAN = auto()
    WRITE_NEW_APP_DATA_ALL_CAN = auto()
    PING_CAN = auto()
    APP_DISABLE_OUTPUT = auto()
    TERMINAL_CMD_SYNC = auto()
    GET_IMU_DATA = auto()
    BM_CONNECT = auto()
    BM_ERASE_FLASH_ALL = auto()
    BM_WRITE_FLASH = auto()
    BM_REBOOT = auto()
    BM_DISCONNECT = auto()
    BM_MAP_PINS_DEFAULT = auto()
    BM_MAP_PINS_NRF5X = auto()
    ERASE_BOOTLOADER = auto()
    ERASE_BOOTLOADER_ALL_CAN = auto()
    PLOT_INIT = auto()
    PLOT_DATA = auto()
    PLOT_ADD_GRAPH = auto()
    PLOT_SET_GRAPH = auto()
    GET_DECODED_BALANCE = auto()
    BM_MEM_READ = auto()
    WRITE_NEW_APP_DATA_LZO = auto()
    WRITE_NEW_APP_DATA_ALL_CAN_LZO = auto()
    BM_WRITE_FLASH_LZO = auto()
    SET_CURRENT_REL = auto()
    CAN_FWD_FRAME = auto()
    SET_BATTERY_CUT = auto()
    SET_BLE_NAME = auto()
    SET_BLE_PIN = auto()
    SET_CAN_MODE = auto()
    GET_IMU_CALIBRATION = auto()
    GET_MCCONF_TEMP = auto()

    # Custom configuration for hardware
    GET_CUSTOM_CONFIG_XML = auto()
    GET_CUSTOM_CONFIG = auto()
    GET_CUSTOM_CONFIG_DEFAULT = auto()
    SET_CUSTOM_CONFIG = auto()

    # BMS commands
    BMS_GET_VALUES = auto()
    BMS_SET_CHARGE_ALLOWED = auto()
    BMS_SET_BALANCE_OVERRIDE = auto()
    BMS_RESET_COUNTERS = auto()
    BMS_FORCE_BALANCE = auto()
    BMS_ZERO_CURRENT_OFFSET = auto()

    # Firmware update commands for different hardware types
    JUMP_TO_BOOTLOADER_HW = auto()
    ERASE_NEW_APP_HW = auto()
    WRITE_NEW_APP_DATA_HW = auto()
    ERASE_BOOTLOADER_HW = auto()
    JUMP_TO_BOOTLOADER_ALL_CAN_HW = auto()
    ERASE_NEW_APP_ALL_CAN_HW = auto()
    WRITE_NEW_APP_DATA_ALL_CAN_HW = auto()
    ERASE_BOOTLOADER_ALL_CAN_HW = auto()

    SET_ODOMETER = auto()

    # Power switch commands
    PSW_GET_STATUS = auto()
    PSW_SWITCH = auto()

    BMS_FWD_CAN_RX = auto()
    BMS_HW_DATA = auto()
    GET_BATTERY_CUT = auto()
    BM_HALT_REQ = auto()
    GET_QML_UI_HW = auto()
    GET_QML_UI_APP = auto()
    CUSTOM_HW_DATA = auto()
    QMLUI_ERASE = auto()
    QMLUI_WRITE = auto()

    # IO board
    IO_BOARD_GET_ALL = auto()
    IO_BOARD_SET_PWM = auto()
    IO_BOARD_SET_DIGITAL = auto()

    BM_MEM_WRITE = auto()
    BMS_BLNC_SELFTEST = auto()
    GET_EXT_HUM_TMP = auto()
    GET_STATS = auto()
    RESET_STATS = auto()

    # Lisp
    LISP_READ_CODE = auto()
    LISP_WRITE_CODE = auto()
    LISP_ERASE_CODE = auto()
    LISP_SET_RUNNING = auto()
    LISP_GET_STATS = auto()
    LISP_PRINT = auto()

    BMS_SET_BATT_TYPE = auto()
    BMS_GET_BATT_TYPE = auto()

    LISP_REPL_CMD = auto()


@unique
class CanPacketId(IntEnum):
    """Packet id carried in the extended id of a CAN frame."""

    SET_DUTY = 0
    SET_CURRENT = auto()
    SET_CURRENT_BRAKE = auto()
    SET_RPM = auto()
    SET_POS = auto()
    FILL_RX_BUFFER = auto()
    FILL_RX_BUFFER_LONG = auto()
    PROCESS_RX_BUFFER = auto()
    PROCESS_SHORT_BUFFER = auto()
    STATUS = auto()
    SET_CURRENT_REL = auto()
    SET_CURRENT_BRAKE_REL = auto()
    SET_CURRENT_HANDBRAKE = auto()
    SET_CURRENT_HANDBRAKE_REL = auto()
    STATUS_2 = auto()
    STATUS_3 = auto()
    STATUS_4 = auto()
    PING = auto()
    PONG = auto()
    DETECT_APPLY_ALL_FOC = auto()
    DETECT_APPLY_ALL_FOC_RES = auto()
    CONF_CURRENT_LIMITS = auto()
    CONF_STORE_CURRENT_LIMITS = auto()
    CONF_CURRENT_LIMITS_IN = auto()
    CONF_STORE_CURRENT_LIMITS_IN = auto()
    CONF_FOC_ERPMS = auto()
    CONF_STORE_FOC_ERPMS = auto()
    STATUS_5 = auto()
    POLL_TS5700N8501_STATUS = auto()
    CONF_BATTERY_CUT = auto()
    CONF_STORE_BATTERY_CUT = auto()
    SHUTDOWN = auto()
    IO_BOARD_ADC_1_TO_4 = auto()
    IO_BOARD_ADC_5_TO_8 = auto()
    IO_BOARD_ADC_9_TO_12 = auto()
    IO_BOARD_DIGITAL_IN = auto()
    IO_BOARD_SET_OUTPUT_DIGITAL = auto()
    IO_BOARD_SET_OUTPUT_PWM = auto()
    BMS_V_TOT = auto()
    BMS_I = auto()
    BMS_AH_WH = auto()
    BMS_V_CELL = auto()
    BMS_BAL = auto()
    BMS_TEMPS = auto()
    BMS_HUM = auto()
    BMS_SOC_SOH_TEMP_STAT = auto()
    PSW_STAT = auto()
    PSW_SWITCH = auto()
    BMS_HW_DATA_1 = auto()
    BMS_HW_DATA_2 = auto()
    BMS_HW_DATA_3 = auto()
    BMS_HW_DATA_4 = auto()
    BMS_HW_DATA_5 = auto()
    BMS_AH_WH_CHG_TOTAL = auto()
    BMS_AH_WH_DIS_TOTAL = auto()
    UPDATE_PID_POS_OFFSET = auto()
    POLL_ROTOR_POS = auto()
    NOTIFY_BOOT = auto()
    STATUS_6 = auto()


@unique
class MotePacket(IntEnum):
    """Packet id used by the wireless remote."""

    BATT_LEVEL = 0
    BUTTONS = auto()
    ALIVE = auto()
    FILL_RX_BUFFER = auto()
    FILL_RX_BUFFER_LONG = auto()
    PROCESS_RX_BUFFER = auto()
    PROCESS_SHORT_BUFFER = auto()
    PAIRING_INFO = auto()


@unique
class NrfPairResult(IntEnum):
    """Outcome of radio pairing."""

    STARTED = 0
    OK = auto()
    FAIL = auto()