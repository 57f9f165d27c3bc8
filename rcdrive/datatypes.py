"""Enumerations describing VESC motor-controller and application configuration."""

from __future__ import annotations

from enum import IntEnum, unique


@unique
class HwType(IntEnum):
    """Kind of hardware on the other end of the link."""

    VESC = 0
    VESC_BMS = 1
    CUSTOM_MODULE = 2


@unique
class McState(IntEnum):
    """Motor controller run state."""

    OFF = 0
    DETECTING = 1
    RUNNING = 2
    FULL_BRAKE = 3


@unique
class PwmMode(IntEnum):
    """BLDC PWM switching mode."""

    NONSYNCHRONOUS_HISW = 0  # not recommended
    SYNCHRONOUS = 1  # recommended and most tested
    BIPOLAR = 2  # occasional glitches, can kill MOSFETs


@unique
class CommMode(IntEnum):
    """BLDC commutation mode."""

    INTEGRATE = 0
    DELAY = 1


@unique
class SensorMode(IntEnum):
    """BLDC rotor position sensing mode."""

    SENSORLESS = 0
    SENSORED = 1
    HYBRID = 2


@unique
class FocSensorMode(IntEnum):
    """FOC rotor position sensing mode."""

    SENSORLESS = 0
    ENCODER = 1
    HALL = 2
    HFI = 3
    HFI_START = 4
    HFI_V2 = 5
    HFI_V3 = 6
    HFI_V4 = 7
    HFI_V5 = 8


@unique
class OutAuxMode(IntEnum):
    """Behaviour of the auxiliary output."""

    OFF = 0
    ON_AFTER_2S = 1
    ON_AFTER_5S = 2
    ON_AFTER_10S = 3
    UNUSED = 4
    ON_WHEN_RUNNING = 5
    ON_WHEN_NOT_RUNNING = 6
    MOTOR_50 = 7
    MOSFET_50 = 8
    MOTOR_70 = 9
    MOSFET_70 = 10
    MOTOR_MOSFET_50 = 11
    MOTOR_MOSFET_70 = 12


@unique
class TempSensorType(IntEnum):
    """Motor temperature sensor type."""

    NTC_10K_25C = 0
    PTC_1K_100C = 1
    KTY83_122 = 2
    NTC_100K_25C = 3
    KTY84_130 = 4
    NTCX = 5
    PTCX = 6


@unique
class GpdOutputMode(IntEnum):
    """General purpose drive output mode."""

    NONE = 0
    MODULATION = 1
    VOLTAGE = 2
    CURRENT = 3


@unique
class MotorType(IntEnum):
    """Kind of motor being driven."""

    BLDC = 0
    DC = 1
    FOC = 2
    GPD = 3


@unique
class ControlMode(IntEnum):
    """Active control loop of the motor controller."""

    DUTY = 0
    SPEED = 1
    CURRENT = 2
    CURRENT_BRAKE = 3
    POS = 4
    HANDBRAKE = 5
    OPENLOOP = 6
    OPENLOOP_PHASE = 7
    OPENLOOP_DUTY = 8
    OPENLOOP_DUTY_PHASE = 9
    NONE = 10


@unique
class SensorPortMode(IntEnum):
    """Use of the sensor port."""

    HALL = 0
    ABI = 1
    AS5047_SPI = 2
    AD2S1205 = 3
    SINCOS = 4
    TS5700N8501 = 5
    TS5700N8501_MULTITURN = 6
    MT6816_SPI = 7


@unique
class CanBaud(IntEnum):
    """CAN bus bit rate selector."""

    BAUD_125K = 0
    BAUD_250K = 1
    BAUD_500K = 2
    BAUD_1M = 3
    BAUD_10K = 4
    BAUD_20K = 5
    BAUD_50K = 6
    BAUD_75K = 7
    BAUD_100K = 8


@unique
class BatteryType(IntEnum):
    """Battery chemistry and its cell voltage range."""

    LIION_3_0__4_2 = 0
    LIIRON_2_6__3_6 = 1
    LEAD_ACID = 2


@unique
class AppUse(IntEnum):
    """Input application the controller runs."""

    NONE = 0
    PPM = 1
    ADC = 2
    UART = 3
    PPM_UART = 4
    ADC_UART = 5
    NUNCHUK = 6
    NRF = 7
    CUSTOM = 8
    BALANCE = 9
    PAS = 10
    ADC_PAS = 11


@unique
class PpmControlType(IntEnum):
    """How a PPM input is mapped to motor commands."""

    NONE = 0
    CURRENT = 1
    CURRENT_NOREV = 2
    CURRENT_NOREV_BRAKE = 3
    DUTY = 4
    DUTY_NOREV = 5
    PID = 6
    PID_NOREV = 7
    CURRENT_BRAKE_REV_HYST = 8
    CURRENT_SMART_REV = 9
    PID_POSITION_180 = 10
    PID_POSITION_360 = 11


@unique
class AdcControlType(IntEnum):
    """How an ADC input is mapped to motor commands."""

    NONE = 0
    CURRENT = 1
    CURRENT_REV_CENTER = 2
    CURRENT_REV_BUTTON = 3
    CURRENT_REV_BUTTON_BRAKE_ADC = 4
    CURRENT_REV_BUTTON_BRAKE_CENTER = 5
    CURRENT_NOREV_BRAKE_CENTER = 6
    CURRENT_NOREV_BRAKE_BUTTON = 7
    CURRENT_NOREV_BRAKE_ADC = 8
    DUTY = 9
    DUTY_REV_CENTER = 10
    DUTY_REV_BUTTON = 11
    PID = 12
    PID_REV_CENTER = 13
    PID_REV_BUTTON = 14


@unique
class ChukControlType(IntEnum):
    """How nunchuk input is mapped to motor commands."""

    NONE = 0
    CURRENT = 1
    CURRENT_NOREV = 2
    CURRENT_BIDIRECTIONAL = 3


@unique
class ShutdownMode(IntEnum):
    """Power switch behaviour."""

    ALWAYS_OFF = 0
    ALWAYS_ON = 1
    TOGGLE_BUTTON_ONLY = 2
    OFF_AFTER_10S = 3
    OFF_AFTER_1M = 4
    OFF_AFTER_5M = 5
    OFF_AFTER_10M = 6
    OFF_AFTER_30M = 7
    OFF_AFTER_1H = 8
    OFF_AFTER_5H = 9


@unique
class ImuType(IntEnum):
    """Inertial measurement unit in use."""

    OFF = 0
    INTERNAL = 1
    EXTERNAL_MPU9X50 = 2
    EXTERNAL_ICM20948 = 3
    EXTERNAL_BMI160 = 4
    EXTERNAL_LSM6DS3 = 5


@unique
class CanMode(IntEnum):
    """Protocol spoken on the CAN bus."""

    VESC = 0
    UAVCAN = 1
    COMM_BRIDGE = 2