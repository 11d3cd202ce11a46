"""配置文件"""

# 引擎参数
ENGINE_CONFIG = {
    "postfix_separator": " ",
    "postfix_trailing_space": False,  # 旧版输出末尾多一个空格，这里默认去掉
    "skip_unknown_tokens": False,  # True: 忽略无法识别的字符继续转换（旧版行为）
    "strict_numeric": True,  # False: 只按首字符判断是否为数值
    "emit_flush_steps": True,  # 输入结束后弹出剩余操作符时也发出步骤事件
}

# 交互栈会话参数
SESSION_CONFIG = {
    "result_precision": 2,  # 数值运算结果保留两位小数
    "session_operators": ["+", "-", "*", "/"],
    "allow_leading_dot": True,  # 允许压入 '.5' 这样的Token
}

# 往返校验参数
VALIDATION_CONFIG = {
    "rtol": 1e-9,
    "atol": 1e-9,
    "sample_expressions": [
        "1+2*3",
        "(1+2)*3",
        "2^3^2",
        "10/4-1.5",
        "((7-2)*(3+1))/5",
        "2*3^2-8/4",
        "100-20-30",
        "64/4/2",
    ],
}

# 日志参数
LOGGING_CONFIG = {
    "level": "INFO",
    "format": '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
}


# 验证配置
def validate_config():
    """验证配置的合理性"""
    assert ENGINE_CONFIG["postfix_separator"] == " ", "后缀表达式Token之间用单个空格分隔"
    assert SESSION_CONFIG["result_precision"] >= 0, "精度不能为负"
    assert set(SESSION_CONFIG["session_operators"]) <= {"+", "-", "*", "/"}, "交互栈只支持四则运算"
    assert VALIDATION_CONFIG["rtol"] > 0 and VALIDATION_CONFIG["atol"] >= 0, "容差必须为正"
    print("Configuration validated successfully!")
