"""DDL for the MySQL store (idempotent: CREATE TABLE IF NOT EXISTS)."""

SCHEMA_STATEMENTS: tuple[str, ...] = (
    """
    CREATE TABLE IF NOT EXISTS companies (
        company_id INT AUTO_INCREMENT PRIMARY KEY,
        tenant_id VARCHAR(64) NOT NULL,
        name VARCHAR(200) NOT NULL,
        registration_code VARCHAR(32) NOT NULL DEFAULT '',
        tax_number VARCHAR(32) NULL,
        company_type ENUM('employer', 'project') NOT NULL,
        parent_employer_id INT NULL,
        standard_work_week DECIMAL(5, 2) NOT NULL DEFAULT 40,
        travel_allowance_per_km DECIMAL(6, 2) NOT NULL DEFAULT 0,
        holiday_allowance_percentage DECIMAL(5, 2) NOT NULL DEFAULT 0,
        pension_contribution_percentage DECIMAL(5, 2) NOT NULL DEFAULT 0,
        collective_agreement VARCHAR(100) NULL,
        created_at DATETIME NOT NULL DEFAULT CURRENT_TIMESTAMP,
        INDEX idx_companies_tenant_type (tenant_id, company_type),
        CONSTRAINT fk_companies_parent FOREIGN KEY (parent_employer_id) REFERENCES companies(company_id)
    ) ENGINE=InnoDB DEFAULT CHARSET=utf8mb4
    """,
    """
    CREATE TABLE IF NOT EXISTS employees (
        employee_id INT AUTO_INCREMENT PRIMARY KEY,
        tenant_id VARCHAR(64) NOT NULL,
        full_name VARCHAR(200) NOT NULL,
        primary_company_id INT NOT NULL,
        contract_hours_per_week DECIMAL(5, 2) NOT NULL DEFAULT 40,
        created_at DATETIME NOT NULL DEFAULT CURRENT_TIMESTAMP,
        updated_at DATETIME NOT NULL DEFAULT CURRENT_TIMESTAMP ON UPDATE CURRENT_TIMESTAMP,
        INDEX idx_employees_tenant (tenant_id),
        CONSTRAINT fk_employees_primary FOREIGN KEY (primary_company_id) REFERENCES companies(company_id)
    ) ENGINE=InnoDB DEFAULT CHARSET=utf8mb4
    """,
    """
    CREATE TABLE IF NOT EXISTS employee_project_companies (
        employee_id INT NOT NULL,
        company_id INT NOT NULL,
        position INT NOT NULL,
        PRIMARY KEY (employee_id, company_id),
        CONSTRAINT fk_epc_employee FOREIGN KEY (employee_id) REFERENCES employees(employee_id) ON DELETE CASCADE,
        CONSTRAINT fk_epc_company FOREIGN KEY (company_id) REFERENCES companies(company_id)
    ) ENGINE=InnoDB DEFAULT CHARSET=utf8mb4
    """,
    """
    CREATE TABLE IF NOT EXISTS employee_company_assignments (
        assignment_id INT AUTO_INCREMENT PRIMARY KEY,
        employee_id INT NOT NULL,
        company_id INT NOT NULL,
        assignment_type ENUM('primary', 'project') NOT NULL,
        assigned_by VARCHAR(64) NOT NULL,
        assigned_at DATETIME NOT NULL,
        can_log_hours TINYINT(1) NOT NULL DEFAULT 1,
        can_access_reports TINYINT(1) NOT NULL DEFAULT 0,
        can_view_payslips TINYINT(1) NOT NULL DEFAULT 0,
        default_hour_type VARCHAR(20) NOT NULL DEFAULT 'project',
        auto_select_company TINYINT(1) NOT NULL DEFAULT 0,
        INDEX idx_assignments_employee (employee_id)
    ) ENGINE=InnoDB DEFAULT CHARSET=utf8mb4
    """,
    """
    CREATE TABLE IF NOT EXISTS time_records (
        record_id INT AUTO_INCREMENT PRIMARY KEY,
        tenant_id VARCHAR(64) NOT NULL,
        employee_id INT NOT NULL,
        work_date DATE NOT NULL,
        regular_hours DECIMAL(6, 2) NOT NULL DEFAULT 0,
        overtime_hours DECIMAL(6, 2) NOT NULL DEFAULT 0,
        assigned_company_id INT NULL,
        project_code VARCHAR(100) NULL,
        client_id VARCHAR(100) NULL,
        notes TEXT NULL,
        status ENUM('draft', 'approved', 'processed') NOT NULL DEFAULT 'draft',
        created_at DATETIME NOT NULL DEFAULT CURRENT_TIMESTAMP,
        INDEX idx_time_records_employee_date (tenant_id, employee_id, work_date)
    ) ENGINE=InnoDB DEFAULT CHARSET=utf8mb4
    """,
)
